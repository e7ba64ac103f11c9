"""
Spreadsheet row projection for Asana backups.

Column order and placeholder strings are part of the export format; other
tools read these sheets back, so they must not change.
"""
from typing import Any, Dict, List, Optional, Sequence

from src.integrations.asana.schemas import AsanaProject, AsanaTask
from src.utils.datetime import utc_timestamp

TASK_HEADERS = [
    'Task Name', 'Status', 'Assignee', 'Due Date',
    'Completed Date', 'Tags', 'Notes', 'URL',
    'Created At', 'Modified At'
]

STATUS_COMPLETED = 'Completed'
STATUS_INCOMPLETE = 'Incomplete'
UNASSIGNED = 'Unassigned'
NO_OWNER = 'N/A'
TAG_SEPARATOR = ', '


def task_to_row(task: AsanaTask) -> List[str]:
    """Project a task onto the fixed Tasks-sheet columns."""
    assignee = task.assignee.name if task.assignee and task.assignee.name else UNASSIGNED
    tag_names = [tag.name or '' for tag in task.tags or []]

    return [
        task.name or '',
        STATUS_COMPLETED if task.completed else STATUS_INCOMPLETE,
        assignee,
        task.due_on or task.due_at or '',
        task.completed_at or '',
        TAG_SEPARATOR.join(tag_names),
        task.notes or '',
        task.permalink_url or '',
        task.created_at or '',
        task.modified_at or '',
    ]


def tasks_sheet_values(tasks: Sequence[AsanaTask]) -> List[List[str]]:
    """Header row followed by one row per task."""
    return [list(TASK_HEADERS)] + [task_to_row(task) for task in tasks]


def project_info_rows(
    project: AsanaProject,
    tasks: Sequence[AsanaTask],
    backup_timestamp: Optional[str] = None
) -> List[List[Any]]:
    """Key/value rows for the Project Info sheet."""
    completed = sum(1 for task in tasks if task.completed)
    owner = project.owner.name if project.owner and project.owner.name else NO_OWNER

    return [
        ['Project Name', project.name],
        ['Project ID', project.gid],
        ['Created At', project.created_at],
        ['Modified At', project.modified_at],
        ['Owner', owner],
        ['Archived', 'Yes' if project.archived else 'No'],
        ['Notes', project.notes or ''],
        ['Backup Date', backup_timestamp or utc_timestamp()],
        ['Total Tasks', len(tasks)],
        ['Completed Tasks', completed],
        ['Incomplete Tasks', len(tasks) - completed],
    ]


def parse_task_row(row: Sequence[Any]) -> Dict[str, Any]:
    """
    Read the recoverable fields back out of a Tasks-sheet row.

    Sheets drops trailing empty cells, so short rows are padded first.
    """
    cells = [str(cell) if cell is not None else '' for cell in row]
    cells += [''] * (len(TASK_HEADERS) - len(cells))
    tags = cells[5]

    return {
        'name': cells[0],
        'completed': cells[1] == STATUS_COMPLETED,
        'due': cells[3],
        'tags': tags.split(TAG_SEPARATOR) if tags else [],
    }
