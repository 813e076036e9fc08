#!/usr/bin/env python3
"""Tests for application root resolution and path derivation."""

import importlib.util
import os
import shutil
import tempfile
import unittest
import zipfile
import zipimport
from importlib.machinery import ModuleSpec
from pathlib import Path

from yugioh_cards.paths import (
    ApplicationRootError,
    build_paths,
    resolve_application_root,
    safe_join,
)


class TestSafeJoin(unittest.TestCase):
    """Test single-segment path joining."""

    def setUp(self):
        """Set up test environment."""
        self.temp_dir = Path(tempfile.mkdtemp())
        self.addCleanup(shutil.rmtree, self.temp_dir, ignore_errors=True)

    def test_joined_path_is_child_of_base(self):
        """Test valid segments resolve directly beneath the base."""
        base = Path(os.path.normpath(os.path.abspath(self.temp_dir)))
        for child in ["resource", "allcards.json", "main.log", "a b", "..hidden", "x.."]:
            joined = safe_join(self.temp_dir, child)
            self.assertIsNotNone(joined, child)
            self.assertEqual(joined.parent, base)
            self.assertEqual(joined.name, child)

    def test_accepts_string_base(self):
        """Test the base may be given as a string."""
        joined = safe_join(str(self.temp_dir), "log")
        self.assertEqual(joined.name, "log")

    def test_normalizes_base(self):
        """Test a base containing traversal segments is normalized first."""
        messy_base = str(self.temp_dir / "inner" / "..")
        joined = safe_join(messy_base, "output")
        self.assertEqual(
            joined, Path(os.path.normpath(os.path.abspath(self.temp_dir))) / "output"
        )

    def test_rejects_unsafe_segments(self):
        """Test unsafe segments return None instead of raising."""
        for child in ["..", ".", "a/b", "a\\b", "/etc", "../escape", "", "   "]:
            self.assertIsNone(safe_join(self.temp_dir, child), repr(child))

    def test_rejects_empty_base(self):
        """Test empty or blank base paths are rejected."""
        self.assertIsNone(safe_join("", "output"))
        self.assertIsNone(safe_join("   ", "output"))
        self.assertIsNone(safe_join(None, "output"))

    def test_rejects_missing_child(self):
        """Test a missing child segment is rejected."""
        self.assertIsNone(safe_join(self.temp_dir, None))


class TestResolveApplicationRoot(unittest.TestCase):
    """Test application root resolution for each code location."""

    def setUp(self):
        """Set up test environment."""
        self.temp_dir = Path(tempfile.mkdtemp()).resolve()
        self.addCleanup(shutil.rmtree, self.temp_dir, ignore_errors=True)

    def test_loose_package_resolves_to_import_root(self):
        """Test a package directory resolves to the directory containing it."""
        package_dir = self.temp_dir / "cards_pkg"
        package_dir.mkdir()
        init_file = package_dir / "__init__.py"
        init_file.write_text("")

        spec = importlib.util.spec_from_file_location(
            "cards_pkg", init_file, submodule_search_locations=[str(package_dir)]
        )
        self.assertEqual(resolve_application_root(spec), self.temp_dir)

    def test_single_module_resolves_to_its_directory(self):
        """Test a single-file module resolves to its parent directory."""
        module_file = self.temp_dir / "cards_module.py"
        module_file.write_text("")

        spec = importlib.util.spec_from_file_location("cards_module", module_file)
        self.assertEqual(resolve_application_root(spec), self.temp_dir)

    def test_archive_resolves_to_archive_directory(self):
        """Test code inside a zip archive resolves to the archive's directory."""
        archive = self.temp_dir / "dist" / "app.pyz"
        archive.parent.mkdir()
        with zipfile.ZipFile(archive, "w") as zf:
            zf.writestr("cards_pkg/__init__.py", "")

        importer = zipimport.zipimporter(str(archive))
        spec = ModuleSpec(
            "cards_pkg",
            importer,
            origin=str(archive / "cards_pkg" / "__init__.py"),
            is_package=True,
        )
        self.assertEqual(resolve_application_root(spec), archive.parent)

    def test_unknown_location_falls_back_to_cwd(self):
        """Test a spec without an origin falls back to the working directory."""
        spec = ModuleSpec("cards_pkg", None)
        with self.assertLogs("yugioh_cards.paths", level="WARNING") as logs:
            root = resolve_application_root(spec)

        self.assertEqual(root, Path(os.getcwd()).resolve())
        self.assertIn("current working directory", logs.output[0])

    def test_unsupported_loader_raises(self):
        """Test a loader that is neither file nor archive based is fatal."""
        spec = ModuleSpec("cards_pkg", object(), origin="frozen")
        with self.assertRaises(ApplicationRootError):
            resolve_application_root(spec)

    def test_default_resolves_to_directory_holding_package(self):
        """Test the running package resolves to its import root."""
        root = resolve_application_root()
        self.assertTrue(root.is_dir())
        self.assertTrue((root / "yugioh_cards").is_dir())


class TestBuildPaths(unittest.TestCase):
    """Test derived application paths."""

    def setUp(self):
        """Set up test environment."""
        self.temp_dir = Path(tempfile.mkdtemp())
        self.addCleanup(shutil.rmtree, self.temp_dir, ignore_errors=True)

    def test_layout(self):
        """Test every derived path sits where expected under the root."""
        paths = build_paths(self.temp_dir)
        root = paths.root

        self.assertEqual(paths.resource_dir, root / "resource")
        self.assertEqual(paths.output_dir, root / "resource" / "output")
        self.assertEqual(paths.log_dir, root / "resource" / "log")
        self.assertEqual(paths.all_cards_file, paths.output_dir / "allcards.json")
        self.assertEqual(paths.main_log_file, paths.log_dir / "main.log")
        self.assertEqual(paths.fetch_log_file, paths.log_dir / "getAllCards.log")

        for path in (
            paths.resource_dir,
            paths.output_dir,
            paths.log_dir,
            paths.all_cards_file,
            paths.main_log_file,
            paths.fetch_log_file,
        ):
            self.assertIn(root, path.parents)

    def test_paths_are_not_created(self):
        """Test deriving paths does not touch the filesystem."""
        paths = build_paths(self.temp_dir)
        self.assertFalse(paths.resource_dir.exists())

    def test_paths_are_immutable(self):
        """Test the path bundle cannot be modified."""
        paths = build_paths(self.temp_dir)
        with self.assertRaises(AttributeError):
            paths.root = Path("/")


if __name__ == "__main__":
    unittest.main()
