"""CareerAI：求职者与雇主工具背后的结构化 prompt 调用层。"""

__version__ = "0.1.0"
