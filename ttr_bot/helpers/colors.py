from enum import Enum


class TrainColor(str, Enum):
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    PINK = "pink"
    WHITE = "white"
    BLACK = "black"
    # Wildcard card, pays for any route
    LOCOMOTIVE = "locomotive"
    # Route colour only: any single ordinary colour pays for it
    GREY = "grey"

    def __str__(self):
        return self.value


ORDINARY_COLORS = [c for c in TrainColor if c not in (TrainColor.LOCOMOTIVE, TrainColor.GREY)]


class PlayerColor(str, Enum):
    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    BLACK = "black"
    YELLOW = "yellow"

    def __str__(self):
        return self.value
