"""DocSync — Electron documentation content synchronizer."""
