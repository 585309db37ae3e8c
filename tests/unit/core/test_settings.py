from unittest.mock import patch

from tracking.core.config import Settings, settings


class TestSettings:
    def test_default_settings(self):
        with patch.dict("os.environ", {}, clear=True):
            default_settings = Settings()

        assert default_settings.kafka_bootstrap_servers == "kafka1:19092"
        assert default_settings.kafka_topic_product_events == "product_events"
        assert default_settings.kafka_topic_partitions == 3
        assert default_settings.kafka_create_topics is True
        assert default_settings.otel_service_name == "tracking"
        assert default_settings.app_environment == "production"
        assert default_settings.app_log_level == "INFO"
        assert default_settings.tracing_enabled is False
        assert default_settings.auth_users == {}

    def test_log_redaction_patterns(self):
        for pattern in ["password", "token", "secret", "authorization", "cookie"]:
            assert pattern in settings.app_log_redaction_patterns

    def test_settings_with_environment_variables(self):
        with patch.dict(
            "os.environ",
            {
                "KAFKA_BOOTSTRAP_SERVERS": "localhost:9092",
                "KAFKA_TOPIC_PRODUCT_EVENTS": "staging_product_events",
                "APP_LOG_LEVEL": "DEBUG",
                "APP_ENVIRONMENT": "development",
                "TRACING_ENABLED": "true",
                "AUTH_USERS": '{"u1": "pass-u1"}',
            },
        ):
            test_settings = Settings()

        assert test_settings.kafka_bootstrap_servers == "localhost:9092"
        assert test_settings.kafka_topic_product_events == "staging_product_events"
        assert test_settings.app_log_level == "DEBUG"
        assert test_settings.app_environment == "development"
        assert test_settings.tracing_enabled is True
        assert test_settings.auth_users == {"u1": "pass-u1"}
