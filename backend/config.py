import os

class Config:
    # Optional newline-delimited word list; unset uses the built-in vocabulary.
    # Every participant must run with an identical list.
    WORD_CATALOG_PATH = os.environ.get('WORD_CATALOG_PATH') or None
    # Round schedule as "interval:offset" pairs in minutes
    ROUND_SCHEDULE = os.environ.get('ROUND_SCHEDULE', '60:0,30:5')
    # How long a round accepts answers after it starts (seconds)
    ANSWER_WINDOW_SEC = int(os.environ.get('ANSWER_WINDOW_SEC', '120'))
    # Interval used by CLI commands when none is given
    DEFAULT_INTERVAL_MIN = int(os.environ.get('DEFAULT_INTERVAL_MIN', '30'))
