# src/task_digest/digest/composer.py

from __future__ import annotations

from collections.abc import Sequence

from ..tasks.task_models import BucketSet, Task
from .notification import Notification, comment_button, mrkdwn_section

NO_TASKS_TEXT = "No tasks to display."

COMPLETED_TODAY_HEADER = "*Completed Today:*"
OVERDUE_HEADER = "*Overdue Tasks:*"
DUE_TOMORROW_HEADER = "*Tasks for Tomorrow:*"
USER_COMMENT_HEADER = "*User Comment:*"


def _plain_line(task: Task) -> str:
    return f" * {task.content}\n"


def _overdue_line(task: Task) -> str:
    # Only dated tasks reach the overdue bucket.
    return f" * {task.content} (Due: {task.due.isoformat()})\n"


def _section(header: str, tasks: Sequence[Task], render) -> str:
    return header + "\n" + "".join(render(t) for t in tasks)


def render_body(buckets: BucketSet) -> str:
    sections: list[str] = []
    if buckets.completed_today:
        sections.append(_section(COMPLETED_TODAY_HEADER, buckets.completed_today, _plain_line))
    if buckets.overdue:
        sections.append(_section(OVERDUE_HEADER, buckets.overdue, _overdue_line))
    if buckets.due_tomorrow:
        sections.append(_section(DUE_TOMORROW_HEADER, buckets.due_tomorrow, _plain_line))

    if not sections:
        return NO_TASKS_TEXT
    # Blank line between sections.
    return "\n".join(sections)


def compose(buckets: BucketSet) -> Notification:
    """Render the digest with its "Submit Comment" button. Pure: same buckets, same notification."""
    body = render_body(buckets)
    return Notification(
        text=body,
        blocks=[mrkdwn_section(body.strip()), comment_button()],
    )


def merge_comment(original_text: str, comment: str) -> Notification:
    """Original body untouched, followed by a separate "User Comment" section."""
    comment_text = f"{USER_COMMENT_HEADER}\n{comment}"
    return Notification(
        text=f"{original_text}\n\n{comment_text}",
        blocks=[mrkdwn_section(original_text), mrkdwn_section(comment_text)],
    )
