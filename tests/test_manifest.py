import pytest

from actionkit.manifest import Branding, Manifest, ManifestInput, Output

FULL = """
name: My Action
description: Does things
author: someone
branding:
  icon: box
  color: blue
inputs:
  resolve-versions:
    description: Resolve versions
    deprecationMessage: use something else
    default: "false"
    required: true
  token:
    description: The token
outputs:
  version:
    description: The version
unknown-key: ignored
"""


def test_full_manifest():
    manifest = Manifest.from_yaml(FULL)
    assert manifest.name == "My Action"
    assert manifest.description == "Does things"
    assert manifest.author == "someone"
    assert manifest.branding == Branding(icon="box", color="blue")
    assert manifest.inputs["resolve-versions"] == ManifestInput(
        description="Resolve versions",
        deprecation_message="use something else",
        default="false",
        required=True,
    )
    assert manifest.inputs["token"] == ManifestInput(description="The token")
    assert manifest.outputs == {"version": Output(description="The version")}


def test_input_order_is_kept():
    manifest = Manifest.from_yaml(FULL)
    assert list(manifest.inputs) == ["resolve-versions", "token"]


def test_missing_sections_default_to_empty():
    manifest = Manifest.from_yaml("name: bare\n")
    assert manifest.inputs == {}
    assert manifest.outputs == {}
    assert manifest.branding is None
    assert manifest.author is None


def test_non_mapping_document_rejected():
    with pytest.raises(ValueError):
        Manifest.from_yaml("- a\n- b\n")


def test_empty_document_rejected():
    with pytest.raises(ValueError):
        Manifest.from_yaml("")


def test_required_must_be_boolean():
    with pytest.raises(ValueError):
        Manifest.from_yaml("inputs:\n  a:\n    required: \"yes\"\n")


def test_default_must_be_string():
    with pytest.raises(ValueError):
        Manifest.from_yaml("inputs:\n  a:\n    default: 3\n")


def test_invalid_yaml_rejected():
    with pytest.raises(ValueError):
        Manifest.from_yaml("inputs: [unclosed\n")


def test_from_action_yml(tmp_path):
    path = tmp_path / "action.yml"
    path.write_text(FULL, encoding="utf-8")
    assert Manifest.from_action_yml(path) == Manifest.from_yaml(FULL)


def test_from_action_yml_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Manifest.from_action_yml(tmp_path / "missing.yml")