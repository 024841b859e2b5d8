"""
SSL certificate import for craftenv.

Homestead generates a self-signed certificate for every site. This module
copies it into the folder shared with the host and adds it to the system
keychain as a trusted root.
"""

from pathlib import Path
from typing import Optional

from ..config.settings import GUEST_NGINX_SSL_DIR, GUEST_SSL_DIR, SYSTEM_KEYCHAIN
from ..utils.logging import log_info
from .command_runner import CommandRunner
from .vagrant_manager import VagrantManager


class CertificateManager:
    """Copies a site certificate out of the guest and trusts it on the host."""

    def __init__(self, ssl_path: Path, vagrant: VagrantManager, runner: Optional[CommandRunner] = None):
        self.ssl_path = Path(ssl_path)
        self.vagrant = vagrant
        self.runner = runner or vagrant.runner

    def stage_certificate(self, domain: str) -> Path:
        """Copy the guest's nginx certificate for ``domain`` to the shared folder."""
        self.ssl_path.mkdir(parents=True, exist_ok=True)
        certificate = f"{domain}.crt"
        self.vagrant.ssh(
            f"mkdir -p {GUEST_SSL_DIR} && "
            f"cp {GUEST_NGINX_SSL_DIR}/{certificate} {GUEST_SSL_DIR}/{certificate}"
        )
        return self.ssl_path / certificate

    def trust_certificate(self, certificate: Path) -> None:
        """Add a certificate to the system keychain as a trusted root."""
        self.runner.run(
            [
                "sudo", "security", "add-trusted-cert",
                "-d", "-r", "trustRoot",
                "-k", SYSTEM_KEYCHAIN,
                str(certificate),
            ]
        ).check()
        log_info(f"Trusted {certificate}")

    def import_certificate(self, domain: str) -> Path:
        """Stage and trust the certificate for ``domain``."""
        certificate = self.stage_certificate(domain)
        self.trust_certificate(certificate)
        return certificate
