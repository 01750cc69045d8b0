from enum import Enum

class Action(str, Enum):
    UP        = "UP"
    DOWN      = "DOWN"
    LEFT      = "LEFT"
    RIGHT     = "RIGHT"
    CONFIRM   = "CONFIRM"
    CANCEL    = "CANCEL"
    QUIT      = "QUIT"
    BACKSPACE = "BACKSPACE"
    CHAR      = "CHAR"
