"""核心基础设施"""
