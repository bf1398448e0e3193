"""开放平台请求/响应模型"""
