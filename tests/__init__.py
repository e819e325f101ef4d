"""Test suite for avatarmenu.

Test Structure:
- unit/: Unit tests for individual components, mirroring packages/avatarmenu
- integration/: Load-edit-send flows over a sample VRChat data directory
- fixtures/: Sample avatar OSC config and local avatar data
- conftest.py: Shared fixtures and test configuration
"""
