#!/usr/bin/env python3
"""
DNS Maintenance Mode - Main Entry Point

This is the main entry point for the maintenance mode toggle.
It can be run directly or imported as a module.
"""

from dns_maintenance_mode.cli.main import main

if __name__ == "__main__":
    main()
