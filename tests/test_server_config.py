from gophkeeper.server.config import DEFAULT_DSN, Config, get_config


def test_default_dsn_used_without_flag_or_env():
    config = get_config([], {})
    assert config.store.db_dsn == DEFAULT_DSN
    assert "dbname=gophkeeper" in config.store.db_dsn


def test_flag_sets_dsn():
    config = get_config(["-d", "data.db"], {})
    assert config.store.db_dsn == "data.db"


def test_environment_overrides_flag():
    config = get_config(["-d", "data.db"], {"DATABASE_URI": "other.db"})
    assert config.store.db_dsn == "other.db"


def test_empty_environment_value_is_ignored():
    config = get_config(["-d", "data.db"], {"DATABASE_URI": ""})
    assert config.store.db_dsn == "data.db"


def test_unknown_arguments_are_ignored():
    config = get_config(["--verbose"], {})
    assert config.store.db_dsn == DEFAULT_DSN


def test_logger_level_left_empty():
    assert get_config([], {}).logger.log_level == ""
    assert Config().logger.log_level == ""