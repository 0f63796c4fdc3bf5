"""数据加载与结果导出"""
