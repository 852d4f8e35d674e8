"""Shared fixtures."""

from pathlib import Path
import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Directory holding the sample plan and modules files."""
    return FIXTURES_DIR


@pytest.fixture
def single_module_plan_data():
    """Plan with one child module holding one storage bucket."""
    return {
        "format_version": "1.2",
        "terraform_version": "1.6.6",
        "planned_values": {
            "root_module": {
                "child_modules": [
                    {
                        "address": "module.a",
                        "resources": [
                            {
                                "address": "module.a.google_storage_bucket.b",
                                "mode": "managed",
                                "type": "google_storage_bucket",
                                "name": "b",
                                "values": {"name": "my-bucket"},
                            }
                        ],
                    }
                ]
            }
        },
    }


@pytest.fixture
def single_module_manifest_data():
    """Manifest with the single module 'a'."""
    return {"Modules": [{"Key": "a", "Source": "./modules/a", "Dir": "modules/a"}]}
