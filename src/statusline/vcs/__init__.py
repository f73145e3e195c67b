"""Version-control probing for the statusline."""

from statusline.vcs.probe import GitProbe, StaticProbe, VersionControlProbe, probe_workspace

__all__ = ["GitProbe", "StaticProbe", "VersionControlProbe", "probe_workspace"]
