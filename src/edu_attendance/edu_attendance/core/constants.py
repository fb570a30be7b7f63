"""Constants and defaults.

Column widths mirror database/schema.sql; validators enforce them before any write.
"""

MAX_CODE_LENGTH = 10
MAX_NICKNAME_LENGTH = 50
MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 255
MAX_CAMPUS_LENGTH = 50
MAX_FORM_LENGTH = 20
MAX_DEPARTMENT_LENGTH = 100
MAX_SUBJECT_SET_ID_LENGTH = 20
MAX_SUBJECT_LENGTH = 100
MAX_SESSION_NAME_LENGTH = 100
MAX_ORIGINAL_NAME_LENGTH = 255
MAX_CONTENT_TYPE_LENGTH = 100
# SubjectSet.Credits is DECIMAL(5, 2)
MAX_CREDITS = 1000

DEFAULT_CONTENT_TYPE = "image/jpeg"
DEFAULT_POOL_SIZE = 10
DEFAULT_POOL_NAME = "edu_attendance_pool"
