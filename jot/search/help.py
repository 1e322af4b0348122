"""User-facing reference for the query language."""

HELP_TEXT = """Jot Query Syntax
======================

Basic Search:
  meeting              Search for "meeting" in all fields
  "exact phrase"       Search for exact phrase

Field Filters:
  tag:work             Notes with tag "work"
  title:meeting        Notes with "meeting" in title
  path:projects/       Notes in projects/ directory
  body:important       Search only in body text

Date Filters:
  created:2024-01-01   Created on specific date
  created:>2024-01-01  Created after date
  created:<2024-01-01  Created before date
  modified:>=2024-06   Modified on or after date

Negation:
  -archived            Exclude notes containing "archived"
  -tag:done            Exclude notes with tag "done"

Combining (implicit AND):
  tag:work status:todo Notes with tag "work" AND status "todo"
  meeting -archived    Contains "meeting" but not "archived"

Supported Fields:
  tag       - Filter by tag
  title     - Search in title
  body      - Search in body only
  path      - Filter by path prefix
  created   - Filter by creation date
  modified  - Filter by modification date
  status    - Filter by status field

Examples:
  tag:work                      All work-tagged notes
  tag:work title:meeting        Work notes about meetings
  created:>2024-01-01 -archived Recent notes, not archived
  "project plan" tag:urgent     Exact phrase with tag filter
"""
