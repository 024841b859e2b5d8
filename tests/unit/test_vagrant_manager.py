"""
Unit tests for Vagrant and certificate operations.
"""

import pytest

from conftest import FakeRunner
from craftenv.core.certificate_manager import CertificateManager
from craftenv.core.vagrant_manager import VagrantManager
from craftenv.exceptions import CommandFailedError


class TestVagrantManager:
    """Test Vagrant command construction."""

    def test_reload_and_provision(self, homestead_dir, fake_runner):
        VagrantManager(homestead_dir, runner=fake_runner).reload_and_provision()

        assert fake_runner.calls[0]["command"] == ["vagrant", "reload", "--provision"]
        assert fake_runner.calls[0]["cwd"] == homestead_dir

    def test_reload_failure_raises(self, homestead_dir):
        runner = FakeRunner(fail_on=["reload"])
        with pytest.raises(CommandFailedError) as excinfo:
            VagrantManager(homestead_dir, runner=runner).reload_and_provision()
        assert "vagrant reload --provision" in excinfo.value.message
        assert excinfo.value.details["returncode"] == 1

    def test_alias_domain_runs_guarded_append_in_guest(self, homestead_dir, fake_runner):
        VagrantManager(homestead_dir, runner=fake_runner).alias_domain("example.local")

        command = fake_runner.calls[0]["command"]
        assert command[:4] == ["vagrant", "ssh", "--", "-t"]
        assert command[4] == (
            "grep -qxF '127.0.0.1 example.local' /etc/hosts "
            "|| echo '127.0.0.1 example.local' | sudo tee -a /etc/hosts"
        )
        assert fake_runner.calls[0]["cwd"] == homestead_dir


class TestCertificateManager:
    """Test certificate staging and trust."""

    def test_import_certificate(self, homestead_dir, ssl_dir, fake_runner):
        vagrant = VagrantManager(homestead_dir, runner=fake_runner)
        certificate = CertificateManager(ssl_dir, vagrant).import_certificate("example.local")

        assert ssl_dir.is_dir()
        assert certificate == ssl_dir / "example.local.crt"
        assert fake_runner.calls[0]["command"][-1] == (
            "mkdir -p /home/vagrant/.homesteadssl && "
            "cp /etc/nginx/ssl/example.local.crt /home/vagrant/.homesteadssl/example.local.crt"
        )
        assert fake_runner.calls[1]["command"] == [
            "sudo", "security", "add-trusted-cert",
            "-d", "-r", "trustRoot",
            "-k", "/Library/Keychains/System.keychain",
            str(ssl_dir / "example.local.crt"),
        ]

    def test_failed_copy_skips_trust(self, homestead_dir, ssl_dir):
        runner = FakeRunner(fail_on=["vagrant ssh"])
        vagrant = VagrantManager(homestead_dir, runner=runner)

        with pytest.raises(CommandFailedError):
            CertificateManager(ssl_dir, vagrant).import_certificate("example.local")

        assert not any("add-trusted-cert" in command for command in runner.commands)

    def test_failed_trust_raises(self, homestead_dir, ssl_dir):
        runner = FakeRunner(fail_on=["add-trusted-cert"])
        vagrant = VagrantManager(homestead_dir, runner=runner)

        with pytest.raises(CommandFailedError):
            CertificateManager(ssl_dir, vagrant).import_certificate("example.local")
