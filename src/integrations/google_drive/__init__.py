"""
Google Drive Integration Package

Destination store for Asana backups.
"""
from .service import DriveBackupStore
from .rows import TASK_HEADERS, task_to_row, tasks_sheet_values, project_info_rows, parse_task_row

__all__ = [
    'DriveBackupStore',
    'TASK_HEADERS',
    'task_to_row',
    'tasks_sheet_values',
    'project_info_rows',
    'parse_task_row',
]
