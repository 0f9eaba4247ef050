from pathlib import Path

class WeblocRules:
    """
    Central logic for which walked entries are .webloc shortcuts,
    and where they sit relative to the scan root.
    """

    EXTENSION = "webloc"
    ROOT_MARKER = "/"

    @staticmethod
    def extension(path: Path) -> str:
        """
        Text after the last dot of the file name.
        Unlike Path.suffix, a bare ".webloc" counts as having an extension.
        """
        name = path.name
        if "." not in name:
            return ""
        return name.rsplit(".", 1)[1]

    @classmethod
    def is_webloc(cls, path: Path) -> bool:
        """
        Returns True for regular files whose extension is webloc (any case).
        """
        if cls.extension(path).lower() != cls.EXTENSION:
            return False
        return path.is_file()

    @classmethod
    def relative_dir(cls, root: Path, path: Path) -> str:
        """
        Containing directory of `path`, relative to `root`.
        Files directly inside the root map to "/".
        """
        try:
            relative = path.parent.relative_to(root)
        except ValueError:
            # Not under root (shouldn't happen for walked entries); keep the full parent
            return path.parent.as_posix()

        text = relative.as_posix().lstrip("/")
        if text in ("", "."):
            return cls.ROOT_MARKER
        return text
