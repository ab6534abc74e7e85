class CustomException(Exception):
    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

class CoordinateSystemMismatchError(CustomException, TypeError):
    def __init__(self, detail: str = "坐标系统不匹配"):
        super().__init__(detail=detail)

class UnsupportedCoordinateSystemError(CustomException, ValueError):
    def __init__(self, detail: str = "不支持的坐标系统"):
        super().__init__(detail=detail)
