"""
axe-core Accessibility Scan Package

This package contains Selenium-based tests that run axe-core against the
local HTML fixtures in tests/resources/html, covering full-page scans,
rule filters, rule overrides, selector scoping and element scoping.
"""
