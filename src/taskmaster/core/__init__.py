"""TaskMaster Core -- 任务编排层：领域模型、存储抽象与用例服务"""
