# Keeps the project root importable when the tests are run without installing the package
