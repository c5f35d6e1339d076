from typing import Any, Dict, Optional

class BizError(Exception):
    """
    通用业务异常
    """
    def __init__(
        self, 
        message: str, 
        code: int = 400, 
        payload: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.payload = payload or {}
        super().__init__(self.message)

class UnsupportedCoordSystemError(BizError):
    """
    不支持的坐标系名称
    """
    def __init__(self, name: Any, supported: Any = ()):
        super().__init__(
            message=f"不支持的坐标系: {name}",
            code=400,
            payload={"coord_system": str(name), "supported": list(supported)}
        )

class InvalidCoordinateError(BizError):
    """
    坐标点格式错误 (如缺少经纬度或非数字)
    """
    def __init__(self, message: str, index: Optional[int] = None):
        payload = {} if index is None else {"index": index}
        super().__init__(message=message, code=400, payload=payload)

class InvalidGeometryError(BizError):
    """
    GeoJSON 几何对象无法解析
    """
    def __init__(self, message: str, original_error: str = ""):
        super().__init__(
            message=message, 
            code=400, 
            payload={"original_error": str(original_error)}
        )

class BatchTooLargeError(BizError):
    """
    批量转换的点数超过上限
    """
    def __init__(self, count: int, limit: int):
        super().__init__(
            message=f"批量点数超过上限: {count} > {limit}",
            code=413,
            payload={"count": count, "limit": limit}
        )
