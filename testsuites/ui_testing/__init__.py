"""UI testing: page object framework, page objects and browser tests."""
