"""业务模块"""
