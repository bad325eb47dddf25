"""Shared fixtures: extension project trees on disk."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import pytest
import yaml

JAVA_ROOT = "src/main/java"
RESOURCE_ROOT = "src/main/resources"

_OPERATORS_TEMPLATE = """\
<?xml version="1.0" encoding="UTF-8"?>
<operators name="{name}" version="6.0"{docbundle}>
    <group key="web">
        <operator>
            <key>process_documents_from_web</key>
            <class>com.rapidminer.operator.web.ProcessDocumentsFromWeb</class>
        </operator>
    </group>
</operators>
"""

_INIT_CLASS_TEMPLATE = """\
package {package};

public final class {class_name} {{

    public static void initPlugin() {{}}
}}
"""


class ProjectTree:
    """Builder for an extension project directory."""

    def __init__(self, root: Path) -> None:
        self.root = root
        root.mkdir(parents=True, exist_ok=True)

    @property
    def resource_root(self) -> Path:
        return self.root / RESOURCE_ROOT

    def java(self, class_name: str) -> Path:
        """Create the source file of a dotted class name."""
        package, _, simple = class_name.rpartition(".")
        path = self.root / JAVA_ROOT / (class_name.replace(".", "/") + ".java")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(_INIT_CLASS_TEMPLATE.format(package=package, class_name=simple))
        return path

    def resource(self, relative: str, content: str = "") -> Path:
        """Create a file below src/main/resources."""
        path = self.resource_root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    def operators(
        self,
        relative: str = "com/rapidminer/resources/OperatorsWebMining.xml",
        docbundle: str | None = "com/rapidminer/resources/i18n/OperatorsDocWebMining",
        create_bundle: bool = True,
    ) -> Path:
        """Create an operator definitions file and, optionally, its doc bundle."""
        attribute = f' docbundle="{docbundle}"' if docbundle else ""
        path = self.resource(relative, _OPERATORS_TEMPLATE.format(name="web", docbundle=attribute))
        if docbundle and create_bundle:
            self.resource(docbundle + ".xml", "<operatorHelp/>\n")
        return path

    def project_file(self, data: dict[str, Any]) -> Path:
        """Write extension.yaml."""
        path = self.root / "extension.yaml"
        path.write_text(yaml.safe_dump(data, sort_keys=False))
        return path


WEB_MINING_FILE: dict[str, Any] = {
    "version": "1.0.0",
    "extension": {
        "name": "Web Mining",
        "vendor": "RapidMiner GmbH",
        "homepage": "http://www.rapidminer.com",
        "dependencies": {
            "rapidminer": "6.5.0",
            "extensions": [
                {"namespace": "text", "version": "5.3.3-SNAPSHOT"},
                {"namespace": "core", "version": "1.0.0"},
            ],
        },
    },
}


@pytest.fixture
def web_mining_file() -> dict[str, Any]:
    """A fresh copy of the Web Mining project file contents."""
    return copy.deepcopy(WEB_MINING_FILE)


@pytest.fixture
def tree(tmp_path: Path) -> ProjectTree:
    """An empty project tree."""
    return ProjectTree(tmp_path / "web-mining")


@pytest.fixture
def web_mining(tree: ProjectTree) -> ProjectTree:
    """A complete "Web Mining" extension project following all naming conventions."""
    tree.java("com.rapidminer.PluginInitWebMining")
    tree.operators()
    tree.resource("com/rapidminer/resources/i18n/ErrorsWebMining.properties", "error.1=Failed\n")
    tree.resource("com/rapidminer/resources/groups/groupsWebMining.properties", "")
    tree.project_file(WEB_MINING_FILE)
    return tree
