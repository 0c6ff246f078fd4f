"""Tests for the string table localizer."""

from unittest.mock import patch

from p2p_trade_app.locale.localizer import DEFAULT_STRINGS, Localizer


class TestLocalizer:
    """Test Localizer lookups."""

    def test_default_templates(self):
        localizer = Localizer()

        assert localizer.get("formatter.asMaker", "BTC", "buyer") == "BTC buyer as maker"
        assert localizer.get("formatter.asTaker", "XMR", "seller") == "XMR seller as taker"
        assert localizer.get("shared.buyer") == "buyer"

    def test_base_currency_code(self):
        assert Localizer().base_currency_code == "BTC"
        assert Localizer(base_currency_code="LTC").base_currency_code == "LTC"

    def test_overrides_merge_over_defaults(self):
        localizer = Localizer(strings={"shared.buyer": "Käufer"})

        assert localizer.get("shared.buyer") == "Käufer"
        assert localizer.get("shared.seller") == DEFAULT_STRINGS["shared.seller"]

    def test_missing_key_returns_key_and_warns(self):
        localizer = Localizer()

        with patch("p2p_trade_app.locale.localizer.logger") as mock_logger:
            assert localizer.get("does.not.exist") == "does.not.exist"

        mock_logger.warning.assert_called_once_with("Missing string resource", key="does.not.exist")

    def test_braces_in_template_without_args(self):
        """Templates are always formatted, so escaped braces collapse."""
        localizer = Localizer(strings={"note.literal": "{{0}} stays literal"})

        assert localizer.get("note.literal") == "{0} stays literal"

    def test_too_few_args_returns_template_and_warns(self):
        localizer = Localizer()

        with patch("p2p_trade_app.locale.localizer.logger") as mock_logger:
            assert localizer.get("formatter.asMaker", "BTC") == "{0} {1} as maker"

        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.args == ("Malformed string template",)
        assert mock_logger.warning.call_args.kwargs["key"] == "formatter.asMaker"

    def test_placeholder_without_args_returns_template(self):
        localizer = Localizer()

        with patch("p2p_trade_app.locale.localizer.logger") as mock_logger:
            assert localizer.get("formatter.asTaker") == "{0} {1} as taker"

        mock_logger.warning.assert_called_once()

    def test_named_placeholder_returns_template(self):
        localizer = Localizer(strings={"greeting": "Hello {name}"})

        with patch("p2p_trade_app.locale.localizer.logger") as mock_logger:
            assert localizer.get("greeting", "Bob") == "Hello {name}"

        mock_logger.warning.assert_called_once()

    def test_unbalanced_brace_returns_template(self):
        localizer = Localizer(strings={"broken": "50% {off"})

        with patch("p2p_trade_app.locale.localizer.logger") as mock_logger:
            assert localizer.get("broken") == "50% {off"

        mock_logger.warning.assert_called_once()
