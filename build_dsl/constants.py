"""Fixed names shared by the project model and the snippet locator."""

SNIPPET_DIR = "snippet"

JAVA_SOURCE_MARKER = "/src/main/java/"
JAVA_SUFFIX = ".java"

MAIN_SOURCE_SET_NAME = "main"
TEST_SOURCE_SET_NAME = "test"

MODULE_NAME_PROPERTY = "moduleName"

LOGGER_NAME = "build_dsl"

__all__ = [
    "SNIPPET_DIR",
    "JAVA_SOURCE_MARKER",
    "JAVA_SUFFIX",
    "MAIN_SOURCE_SET_NAME",
    "TEST_SOURCE_SET_NAME",
    "MODULE_NAME_PROPERTY",
    "LOGGER_NAME",
]
