"""Constants shared across artifactfinder domain models."""

DEFAULT_EXTENSION = "jar"
PLUGIN_EXTENSION = "jar"
POM_EXTENSION = "pom"

DEFAULT_SCOPE = "compile"
SCOPE_IMPORT = "import"

# Dependency <type> values whose files are stored under another extension.
TYPE_EXTENSIONS = {
    "maven-plugin": "jar",
    "bundle": "jar",
    "ejb": "jar",
    "ejb-client": "jar",
    "java-source": "jar",
    "javadoc": "jar",
    "test-jar": "jar",
}

# Dependency <type> values implying a classifier when none is declared.
TYPE_CLASSIFIERS = {
    "test-jar": "tests",
    "ejb-client": "client",
    "java-source": "sources",
    "javadoc": "javadoc",
}
