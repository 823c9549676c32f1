"""
Fixed certification rules.

Weights and thresholds are business constants and are intentionally not
read from configuration.
"""

# Roster format
ROSTER_DELIMITER = ","
ROSTER_FIELD_COUNT = 5
ROSTER_COLUMNS = (
    "first_name",
    "last_name",
    "department",
    "theoretical_score",
    "practical_score",
)

# Scoring
PRACTICAL_WEIGHT = 0.6
THEORETICAL_WEIGHT = 0.4
SCORE_DECIMAL_PLACES = 2
DOCUMENT_SCORE_DECIMAL_PLACES = 1

# Classification
PASSING_SCORE = 70.0
EXCELLENCE_SCORE = 90.0

# Sentinels
UNKNOWN_DEPARTMENT = "Unknown"
NOT_PROVIDED = "Not provided"

# Letter bodies
EXCELLENT_BODY_TEXT = (
    "We are pleased to inform you that you have successfully completed the "
    "training. Your final score is {score}. You have been found suitable for "
    "the role of departmental technology lead."
)
STANDARD_BODY_TEXT = (
    "We are pleased to inform you that you have completed the training. "
    "Unfortunately, no suitable role has been found for you at this time."
)
