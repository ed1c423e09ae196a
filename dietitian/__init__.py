"""
The Dietitian 后端服务
"""

__version__ = "1.0.0"
