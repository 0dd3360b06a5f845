#!/usr/bin/env python3
"""
Main entry point for the Candidate Referral Tracker
This is a lightweight Flask app that provides:
- A dashboard for referring candidates and updating their status
- JSON API endpoints over a flat-file candidate store
- PDF resume uploads served under /uploads
"""

from app import create_app
from config import ConfigHelper

app = create_app()

if __name__ == '__main__':
    server = ConfigHelper.get_server_config()
    app.run(host=server['host'], port=server['port'], debug=server['debug'])
