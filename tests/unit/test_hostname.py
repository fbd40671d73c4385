"""Unit tests for hostname lookup."""

from unittest.mock import patch

import pytest

from rpmsnap.errors import EnvironmentSetupError
from rpmsnap.host.identity import get_hostname


class TestGetHostname:
    """Tests for get_hostname."""

    def test_override_wins(self):
        with patch("rpmsnap.host.identity.socket.gethostname") as mock_gethostname:
            assert get_hostname("configured.example.org") == "configured.example.org"
            mock_gethostname.assert_not_called()

    def test_qualified_hostname_used_as_is(self):
        with patch("rpmsnap.host.identity.socket.gethostname", return_value="box.example.org"), \
                patch("rpmsnap.host.identity.socket.getfqdn") as mock_getfqdn:
            assert get_hostname() == "box.example.org"
            mock_getfqdn.assert_not_called()

    def test_short_hostname_expanded(self):
        with patch("rpmsnap.host.identity.socket.gethostname", return_value="box"), \
                patch("rpmsnap.host.identity.socket.getfqdn", return_value="box.example.org"):
            assert get_hostname() == "box.example.org"

    def test_short_hostname_kept_without_domain(self):
        with patch("rpmsnap.host.identity.socket.gethostname", return_value="box"), \
                patch("rpmsnap.host.identity.socket.getfqdn", return_value="box"):
            assert get_hostname() == "box"

    def test_empty_hostname_raises(self):
        with patch("rpmsnap.host.identity.socket.gethostname", return_value=""):
            with pytest.raises(EnvironmentSetupError, match="empty name"):
                get_hostname()

    def test_lookup_error_raises(self):
        with patch("rpmsnap.host.identity.socket.gethostname", side_effect=OSError("boom")):
            with pytest.raises(EnvironmentSetupError, match="Could not determine hostname"):
                get_hostname()
