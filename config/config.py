"""配置文件"""

# 命令行交互参数
CLI_CONFIG = {
    "expression_prompt": "Please enter your expression: ",
    "precision_prompt": "Enter the number of significant decimal places you want to print: ",
    "quit_words": ("quit", "exit", "q"),
    "default_precision": None,  # None 表示按最短形式打印
    "max_precision": 50,  # 定点格式下小数位上限
    "farewell": "Hope you have a great experience",
}

# 日志配置
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert CLI_CONFIG["expression_prompt"], "提示语不能为空"
    assert CLI_CONFIG["max_precision"] >= 0, "小数位上限必须非负"
    default_precision = CLI_CONFIG["default_precision"]
    assert default_precision is None or 0 <= default_precision <= CLI_CONFIG["max_precision"], \
        "默认小数位必须在 [0, max_precision] 内"
    assert all(word == word.lower() for word in CLI_CONFIG["quit_words"]), "退出词必须是小写"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    assert "%(message)s" in LOGGING_CONFIG["format"]
