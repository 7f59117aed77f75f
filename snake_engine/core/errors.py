class SnakeEngineError(Exception):
    pass


class GridExhausted(SnakeEngineError):
    """
    Raised when a new start cell is requested but every cell is visited.
    This is the normal end of a fill, not a fault.
    """
    pass


class InvalidDimensions(SnakeEngineError, ValueError):
    def __init__(self, width, height):
        super().__init__(f"Grid dimensions must be positive integers, got {width}x{height}")
        self.width = width
        self.height = height
