"""Tests for 'gmrc database-name'."""


class TestDatabaseNameCommand:
    """Test printing the database name."""

    def test_from_argument(self, cli_invoke, project_dir):
        """The argument is parsed directly."""
        result = cli_invoke("database-name", "postgres://localhost:5432/app")
        assert result.assert_success().stdout.strip() == "app"

    def test_from_stdin(self, cli_invoke, project_dir):
        """'-' reads the connection string from stdin."""
        result = cli_invoke(
            "database-name", "-", input="postgres://localhost/piped\n"
        )
        assert result.assert_success().stdout.strip() == "piped"

    def test_from_settings(self, cli_invoke, write_file):
        """Without an argument connectionString from .gmrc is used."""
        write_file(".gmrc", "{connectionString: 'postgres://localhost/from_rc'}")

        result = cli_invoke("database-name")

        assert result.assert_success().stdout.strip() == "from_rc"

    def test_from_explicit_config(self, cli_invoke, write_module):
        """--config selects the settings file."""
        write_module(
            "ci.gmrc.py", {"connectionString": "postgres://ci-host/ci_db"}
        )

        result = cli_invoke("database-name", "--config", "ci.gmrc.py")

        assert result.assert_success().stdout.strip() == "ci_db"

    def test_settings_without_connection_string(self, cli_invoke, write_file):
        """Missing connectionString is reported."""
        write_file(".gmrc", "{}")

        result = cli_invoke("database-name")

        result.assert_failure(1).assert_contains(
            "'connectionString' is not set in the configuration"
        )

    def test_no_database_in_connection_string(self, cli_invoke, project_dir):
        """Connection strings without a database fail."""
        result = cli_invoke("database-name", "postgres://localhost")

        result.assert_failure(1).assert_contains(
            "Could not determine database name from connection string."
        )

    def test_resolution_error(self, cli_invoke, project_dir):
        """Resolution failures are reported like other commands."""
        result = cli_invoke("database-name")

        result.assert_failure(1).assert_contains("No .gmrc file found")
