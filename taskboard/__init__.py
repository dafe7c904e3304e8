"""Taskboard: task management API with comments and change logs."""
