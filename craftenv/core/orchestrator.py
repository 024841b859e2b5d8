"""
Core provisioning orchestration for craftenv.

This module wires the managers into the ordered pipeline the CLI runs:
merge the box config, update the hosts file, provision the box, import the
certificate, create the env files and, if needed, generate a security key.
"""

from typing import List, Optional

from ..config.settings import ProjectConfig
from ..utils.logging import log_info
from .box_config import BoxConfigManager
from .certificate_manager import CertificateManager
from .command_runner import CommandRunner
from .hosts_manager import HostsManager
from .pipeline import Pipeline, PipelineStep, StepResult
from .security_key import generate_security_key
from .template_manager import TemplateManager, build_env_templates
from .vagrant_manager import VagrantManager

# Step names, in the order they run
MERGE_BOX_CONFIG = "merge-box-config"
UPDATE_HOSTS = "update-hosts"
PROVISION = "provision"
IMPORT_CERTIFICATE = "import-certificate"
CREATE_ENV_FILES = "create-env-files"
GENERATE_SECURITY_KEY = "generate-security-key"


class EnvironmentOrchestrator:
    """Runs one provisioning pass for a resolved ProjectConfig."""

    def __init__(
        self,
        config: ProjectConfig,
        runner: Optional[CommandRunner] = None,
        hosts_manager: Optional[HostsManager] = None,
    ):
        self.config = config
        self.runner = runner or CommandRunner()
        self.box_manager = BoxConfigManager(config.box_config_path)
        self.hosts_manager = hosts_manager or HostsManager(runner=self.runner)
        self.vagrant = VagrantManager(config.homestead_path, runner=self.runner)
        self.certificates = CertificateManager(config.ssl_path, self.vagrant, runner=self.runner)
        self.templates = TemplateManager()
        self.box_ip: Optional[str] = None
        self.pipeline: Optional[Pipeline] = None

    def _merge_box_config(self) -> StepResult:
        box = self.box_manager.merge(self.config)
        self.box_ip = self.box_manager.get_ip(box)
        return StepResult.ok(f"Registered {self.config.project} in {self.box_manager.path}", ip=self.box_ip)

    def _update_hosts(self) -> StepResult:
        self.hosts_manager.register(self.box_ip, self.config.local_domain)
        return StepResult.ok(f"{self.config.local_domain} points to {self.box_ip}")

    def _provision(self) -> StepResult:
        self.vagrant.reload_and_provision()
        self.vagrant.alias_domain(self.config.local_domain)
        return StepResult.ok("Homestead provisioned")

    def _import_certificate(self) -> StepResult:
        try:
            certificate = self.certificates.import_certificate(self.config.local_domain)
        except OSError as e:
            return StepResult.failure(f"Could not prepare {self.config.ssl_path}: {e}")
        return StepResult.ok(f"Trusted SSL certificate {certificate}", certificate=str(certificate))

    def _create_env_files(self) -> StepResult:
        results = self.templates.materialize(build_env_templates(self.config, self.box_ip))
        created = [r.data["target"] for r in results if r.success]
        failed = [r.data["target"] for r in results if not r.success]
        if not created:
            return StepResult.ok("", created=created, failed=failed)
        return StepResult.ok(f"Created {', '.join(created)}", created=created, failed=failed)

    def _generate_security_key(self) -> StepResult:
        generate_security_key(self.config.project_root, runner=self.runner)
        return StepResult.ok("Security key generated")

    def build_steps(self) -> List[PipelineStep]:
        steps = [
            PipelineStep(MERGE_BOX_CONFIG, "Configuring Homestead", self._merge_box_config),
            PipelineStep(UPDATE_HOSTS, "Updating hosts file (this might ask for your password)", self._update_hosts),
            PipelineStep(PROVISION, "Provisioning Homestead", self._provision),
            PipelineStep(
                IMPORT_CERTIFICATE,
                "Copying SSL certificate (this might ask for your password)",
                self._import_certificate,
            ),
            PipelineStep(CREATE_ENV_FILES, "Creating .env files", self._create_env_files),
        ]
        if not self.config.security_key:
            steps.append(PipelineStep(GENERATE_SECURITY_KEY, "Generating security key", self._generate_security_key))
        else:
            log_info("Security key supplied, skipping generation")
        return steps

    def run(self) -> StepResult:
        """Run every step, stopping at the first failure."""
        self.pipeline = Pipeline(self.build_steps())
        return self.pipeline.run()

    @property
    def completed_steps(self) -> List[str]:
        return list(self.pipeline.completed) if self.pipeline else []
