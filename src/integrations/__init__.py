"""
Integrations Module

Clients for the external platforms a backup touches:
- asana: source of projects and tasks
- google_drive: destination folders and spreadsheets
"""
