"""企业模块"""
