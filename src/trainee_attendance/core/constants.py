"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

NOTE_MAX_LENGTH = 100

DEFAULT_ROLLOVER_HOUR = 0

BLANK_TIME_STEP_MINUTES = 15
BLANK_TIME_MAX_MINUTES = 8 * 60

# Message keys resolved by the MessageSource collaborator.
MSG_AUTHORIZATION = "authorization"
MSG_NOT_WORK_DAY = "attendance.notWorkDay"
MSG_PUNCH_ALREADY_EXISTS = "attendance.punchAlreadyExists"
MSG_PUNCH_IN_EMPTY = "attendance.punchInEmpty"
MSG_TRAINING_TIME_RANGE = "attendance.trainingTimeRange"
MSG_BLANK_TIME_ERROR = "attendance.blankTimeError"
MSG_UPDATE_NOTICE = "attendance.updateNotice"
MSG_MAX_LENGTH = "maxlength"
MSG_INPUT_INVALID = "input.invalid"
MSG_TIME_FORMAT = "attendance.timeFormat"

# Field labels passed as message parameters.
LABEL_NOTE = "label.note"
LABEL_START_TIME = "label.startTime"
LABEL_END_TIME = "label.endTime"
LABEL_BLANK_TIME = "label.blankTime"
