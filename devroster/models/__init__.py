"""数据模型模块.

主要模型:
- Developer: 开发者模型
- Gender: 开发者性别枚举
"""

from .developer import Developer, Gender

__all__ = ["Developer", "Gender"]
