"""Configuration for rulegen.

Holds the constants shared by the emitters (placeholders, CI platforms,
bundled templates) and the validated options for a single run.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

REF_PLACEHOLDER = "{GIT_COMMIT_ID}"
SHA256_PLACEHOLDER = "{ARCHIVE_TAR_GZ_SHA256}"

DEFAULT_GITHUB_URL = (
    "https://github.com/rules-proto-grpc/rules_proto_grpc/releases/download/"
    "{ref}/rules_proto_grpc-{ref}.tar.gz"
)
DEFAULT_AVAILABLE_TESTS = "available_tests.txt"

# Version stamped into every generated bazel_dep; replaced at release time
MODULE_VERSION_PLACEHOLDER = "0.0.0.rpg.version.placeholder"

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
DEFAULT_MODULE_TEMPLATE = TEMPLATES_DIR / "MODULE.bazel.template"
DEFAULT_README_HEADER_TEMPLATE = TEMPLATES_DIR / "README.header.md"
DEFAULT_README_FOOTER_TEMPLATE = TEMPLATES_DIR / "README.footer.md"
DEFAULT_INDEX_TEMPLATE = TEMPLATES_DIR / "index.rst"

# Windows is left out until the grpc toolchain builds there again
CI_PLATFORMS: tuple[str, ...] = ("ubuntu2204", "macos")

CI_PLATFORMS_MAP: dict[str, tuple[str, ...]] = {
    "linux": ("ubuntu2204",),
    "windows": ("windows",),
    "macos": ("macos",),
}

EXTRA_PLATFORM_FLAGS: dict[str, tuple[str, ...]] = {
    "ubuntu2204": (),
    "windows": (),
    "macos": (),
}

DOCS_URL = "https://rules-proto-grpc.com/en/latest"
REPO_URL = "https://github.com/rules-proto-grpc/rules_proto_grpc"


class GeneratorOptions(BaseModel):
    """Options for one generator run, as supplied on the command line."""

    model_config = ConfigDict(frozen=True)

    dir: Path = Field(default=Path("."), description="Output root")
    module_template: Path = DEFAULT_MODULE_TEMPLATE
    readme_header_template: Path = DEFAULT_README_HEADER_TEMPLATE
    readme_footer_template: Path = DEFAULT_README_FOOTER_TEMPLATE
    index_template: Path = DEFAULT_INDEX_TEMPLATE
    ref: str = REF_PLACEHOLDER
    sha256: str = SHA256_PLACEHOLDER
    github_url: str = DEFAULT_GITHUB_URL
    available_tests: Path = Path(DEFAULT_AVAILABLE_TESTS)
    force: bool = Field(default=False, description="Rewrite unchanged files")

    @field_validator("dir", mode="before")
    @classmethod
    def dir_not_empty(cls, value: object) -> object:
        if value is None or str(value) == "":
            raise ValueError("--dir required")
        return value

    @property
    def should_derive_sha256(self) -> bool:
        """A real ref with a placeholder checksum means the checksum is derived."""
        return self.ref != REF_PLACEHOLDER and self.sha256 == SHA256_PLACEHOLDER

    def archive_url(self) -> str:
        return self.github_url.replace("{ref}", self.ref)
