from .config import Config

SECRET_KEY = Config.SECRET_KEY

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

DEFAULT_START = Config.DEFAULT_START
SHIFT_STARTS = Config.SHIFT_STARTS
EMPLOYEE_STARTS = Config.EMPLOYEE_STARTS

MAX_CONTENT_LENGTH = Config.MAX_CONTENT_LENGTH
