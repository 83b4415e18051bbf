from typing import Any, Dict, Optional, Union, List

from fastapi.responses import JSONResponse


def standard_response(
    data: Optional[Union[Dict[str, Any], List[Any], str, int, float, bool]] = None,
    code: int = 200,
    msg: str = "操作成功",
) -> Dict[str, Any]:
    """
    创建标准的响应格式

    参数:
        data: 响应数据，可以是任何类型
        code: 响应状态码，默认200表示成功
        msg: 响应消息

    返回:
        Dict[str, Any]: 标准格式的响应对象
    """
    return {
        "code": code,
        "data": data,
        "msg": msg,
    }


def success_response(
    data: Optional[Union[Dict[str, Any], List[Any], str, int, float, bool]] = None,
    msg: str = "操作成功",
) -> Dict[str, Any]:
    return standard_response(data=data, code=200, msg=msg)


def error_response(
    msg: str = "操作失败",
    code: int = 400,
    data: Optional[Union[Dict[str, Any], List[Any], str]] = None,
) -> JSONResponse:
    """
    创建错误响应

    与 standard_response 格式相同，但 HTTP 状态码与 code 字段保持一致
    """
    return JSONResponse(
        content=standard_response(data=data, code=code, msg=msg),
        status_code=code,
    )


def not_found_response(entity: str = "资源") -> JSONResponse:
    """
    创建资源未找到响应

    参数:
        entity: 未找到的实体类型名称
    """
    return error_response(msg=f"{entity}未找到", code=404)
