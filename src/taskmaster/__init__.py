"""TaskMaster -- 个人任务管理"""
