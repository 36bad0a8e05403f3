# Storage keys (one durable entry per collection, rewritten in full on every change)
ASSIGNMENTS_KEY = "assignments"
SUBMISSIONS_KEY = "submissions"
LAST_REMINDER_KEY = "lastReminderDate"

# Single-user placeholder until real accounts exist
STUDENT_NAME = "Current Student"

# Due-date buckets (days left)
URGENT_BELOW_DAYS = 2  # days < 2 -> urgent (overdue included)
WARNING_MAX_DAYS = 5  # 2..5 -> warning, above -> normal

# Daily reminder window, inclusive on both ends
REMINDER_MIN_DAYS = 0
REMINDER_MAX_DAYS = 3

# Panels
STUDENT_VIEW = "student"
TEACHER_VIEW = "teacher"
DEFAULT_VIEW = STUDENT_VIEW
