"""Sample legacy task documents.

Deliberately inconsistent: mixed title keys, numeric and text status codes,
comma-joined tag strings.  Used by ``POST /api/tasks/seed/legacy`` and
``scripts/seed_demo.py``.
"""
from __future__ import annotations

from typing import Any

LEGACY_TASK_SEED: list[dict[str, Any]] = [
    {
        "title": "Auth API Implementation",
        "desc": "Build JWT-based user authentication system",
        "status": "in-progress",
        "priority": "high",
        "assignee": "James Rodriguez",
        "due_date": "2024-04-15",
        "tags": ["backend", "security", "API"],
        "legacy_ref": "JIRA-001",
    },
    {
        "task_name": "Schema Design Review",
        "desc": "Review the new database schema design document",
        "status": "todo",
        "priority": "2",
        "assignee": "Priya Sharma",
        "due_date": "2024-04-20",
        "tags": "design,review",
        "sys_id": "SYS-A042",
    },
    {
        "title": "Frontend Dashboard UI",
        "desc": "Build the main HR dashboard with metrics cards",
        "status": "2",
        "priority": "high",
        "assignee": "Chen Wei",
        "due": "2024-04-30",
        "tags": ["frontend", "react", "dashboard"],
    },
    {
        "title": "Kanban Board Integration",
        "desc": "Integrate drag and drop on the board columns",
        "status": "done",
        "priority": "medium",
        "owner": "Marco Rossi",
        "due_date": "2024-03-31",
        "tags": ["frontend", "kanban"],
    },
    {
        "task_name": "Database Migration Script",
        "description": "Write script to migrate legacy data into the new relational schema",
        "status": 3,
        "priority": "critical",
        "assignee": "Hiroshi Tanaka",
        "deadline": "2024-03-25",
        "tags": "database, migration , ops",
        "raw_json": {"old_system_ref": "LEGACY-DB-042", "batch": "batch_3"},
    },
    {
        "name": "Multi-language Support Removal",
        "desc": "Remove i18n layer and standardise on English-only routing",
        "status": "review",
        "priority": 1,
        "member": "Miku Kobayashi",
        "due_date": "2024-04-10",
        "tags": ["frontend", "refactor"],
    },
    {
        "title": "Agent API Bridge",
        "desc": "Build the document parsing interface",
        "status": "TODO",
        "priority": "blocker",
        "assignee": "Yuki Sato",
        "due_date": "05/01/2024",
        "tags": ["ai", "backend", "feature"],
    },
    {
        "task_name": "Docker Container Optimization",
        "desc": "Optimize Docker images for production deployment",
        "status": "1",
        "priority": "normal",
        "assignee": "Kenji Yamamoto",
        "due_date": "end of sprint",
        "tags": ["devops", "docker"],
    },
]
