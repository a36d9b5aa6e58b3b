"""
Tests for generators/precommit — template → YAML rendering.

Pure unit tests: language name in → GeneratedFile out.
No filesystem required.
"""

import pytest
import yaml

from hookinit.core.errors import RenderError, UnsupportedLanguageError
from hookinit.core.models.hooks import Hook, HookConfig, Repo
from hookinit.core.services.generators import precommit
from hookinit.core.services.generators.precommit import (
    generate_precommit_config,
    render_config,
)
from hookinit.core.services.templates import get_template


# ═══════════════════════════════════════════════════════════════════
#  render_config
# ═══════════════════════════════════════════════════════════════════


class TestRenderConfig:
    def _config(self, **hook_fields) -> HookConfig:
        hook = Hook(id="t", name="t", entry="make t", **hook_fields)
        return HookConfig(repos=(Repo(repo="local", hooks=(hook,)),))

    def test_block_style(self):
        text = render_config(self._config(stages=("commit",)))
        assert "{" not in text
        assert "- repo: local" in text
        assert "  - commit" in text

    def test_key_order_follows_schema(self):
        text = render_config(self._config(
            always_run=True, verbose=True, pass_filenames=False,
            stages=("commit",), types=("python",), files="^src/",
        ))
        keys = [
            line.strip().lstrip("- ").split(":")[0]
            for line in text.splitlines()
            if ":" in line
        ]
        hook_keys = keys[keys.index("id"):]
        assert hook_keys == [
            "id", "name", "entry", "language", "always_run", "verbose",
            "pass_filenames", "stages", "types", "files",
        ]

    def test_unset_fields_omitted(self):
        text = render_config(self._config())
        assert "null" not in text
        assert "always_run" not in text
        assert "stages" not in text
        assert "rev" not in text
        assert "fail_fast" not in text

    def test_booleans_are_yaml_bools(self):
        data = yaml.safe_load(render_config(self._config(always_run=True, pass_filenames=False)))
        hook = data["repos"][0]["hooks"][0]
        assert hook["always_run"] is True
        assert hook["pass_filenames"] is False

    def test_yaml_error_becomes_render_error(self, monkeypatch):
        def _boom(*_args, **_kwargs):
            raise yaml.YAMLError("cannot represent")

        monkeypatch.setattr(precommit.yaml, "dump", _boom)
        with pytest.raises(RenderError, match="cannot represent"):
            render_config(self._config())


# ═══════════════════════════════════════════════════════════════════
#  generate_precommit_config
# ═══════════════════════════════════════════════════════════════════


class TestGeneratePrecommitConfig:
    @pytest.mark.parametrize("name", ["python", "PYTHON", "Rust", "gO"])
    def test_parse_back_matches_template(self, name: str):
        """Rendered YAML reloads to exactly the template it came from."""
        result = generate_precommit_config(name)
        reloaded = HookConfig.model_validate(yaml.safe_load(result.content))
        assert reloaded == get_template(name)

    def test_path_is_fixed(self):
        assert generate_precommit_config("go").path == ".pre-commit-config.yaml"

    def test_overwrite_carried(self):
        assert generate_precommit_config("go").overwrite is False
        assert generate_precommit_config("go", overwrite=True).overwrite is True

    def test_reason_lists_hooks(self):
        result = generate_precommit_config("RUST")
        assert result.reason.startswith("pre-commit hooks for rust:")
        assert "cargo-clippy" in result.reason

    def test_python_first_hook(self):
        data = yaml.safe_load(generate_precommit_config("Python").content)
        first = data["repos"][0]["hooks"][0]
        assert first["entry"] == "pytest -n auto --quiet"
        assert first["stages"] == ["commit", "push"]

    def test_gofmt_regex_survives(self):
        data = yaml.safe_load(generate_precommit_config("go").content)
        gofmt = data["repos"][0]["hooks"][2]
        assert gofmt["files"] == r"\.go$"

    def test_unsupported_language(self):
        with pytest.raises(UnsupportedLanguageError):
            generate_precommit_config("haskell")
