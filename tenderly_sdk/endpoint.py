"""
Endpoint descriptors

每个远程操作的 HTTP 方法、相对路径和作用域都以常量形式写在对应的 api 模块中，
请求形状以这些常量为准，不从方法名推断。
"""

from typing import NamedTuple

from .utils import encode_path_segment


# 作用域：决定路径拼接在哪个前缀之后
PROJECT = "project"   # {base}/account/{account}/project/{project}{path}
ACCOUNT = "account"   # {base}/account/{account}{path}
ROOT = "root"         # {base}{path}


class Endpoint(NamedTuple):
    """单个远程操作"""

    method: str
    path: str
    scope: str = PROJECT

    def bind(self, **params: object) -> "Endpoint":
        """用 URL 编码后的参数填充路径占位符"""
        encoded = {key: encode_path_segment(value) for key, value in params.items()}
        return self._replace(path=self.path.format(**encoded))
