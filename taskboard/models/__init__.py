from .task import Task, TaskPriority, TaskStatus, utcnow

# Export all models for easy importing
__all__ = ["Task", "TaskPriority", "TaskStatus", "utcnow"]
