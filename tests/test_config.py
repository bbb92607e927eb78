import unittest
from unittest import mock

from lottery_admin.config import (
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    get_config,
    resolve_database_url,
)


class ResolveDatabaseUrlTests(unittest.TestCase):
    def test_explicit_url_wins(self):
        env = {"DATABASE_URL": "postgresql+psycopg2://u:p@db/lottery", "PGHOST": "ignored"}
        with mock.patch.dict("os.environ", env, clear=True):
            self.assertEqual(resolve_database_url(), "postgresql+psycopg2://u:p@db/lottery")

    def test_built_from_pg_variables(self):
        env = {"PGHOST": "db.internal", "PGUSER": "admin", "PGDATABASE": "lottery", "PGPORT": "6543"}
        with mock.patch.dict("os.environ", env, clear=True):
            url = resolve_database_url()
        self.assertTrue(url.startswith("postgresql+psycopg2://admin@db.internal:6543/lottery"))
        self.assertIn("sslmode=require", url)

    def test_falls_back_to_local_sqlite(self):
        with mock.patch.dict("os.environ", {}, clear=True):
            self.assertEqual(resolve_database_url(), "sqlite:///./lottery_admin.db")


class GetConfigTests(unittest.TestCase):
    def test_selects_class_by_app_env(self):
        for value, expected in (
            ("production", ProductionConfig),
            (" Testing ", TestingConfig),
            ("development", DevelopmentConfig),
            ("staging", DevelopmentConfig),
        ):
            with self.subTest(value=value):
                with mock.patch.dict("os.environ", {"APP_ENV": value}):
                    self.assertIs(get_config(), expected)

    def test_testing_config_uses_memory_database(self):
        self.assertEqual(TestingConfig.DATABASE_URL, "sqlite:///:memory:")


if __name__ == "__main__":
    unittest.main()
