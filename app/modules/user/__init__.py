"""用户模块"""
