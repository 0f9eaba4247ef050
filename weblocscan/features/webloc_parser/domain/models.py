from dataclasses import dataclass

@dataclass(frozen=True)
class PlistTags:
    """
    Element names of the minimal XML property list a .webloc carries:
    <plist><dict><key>URL</key><string>...</string></dict></plist>
    """
    dict_tag: str = "dict"
    key_tag: str = "key"
    string_tag: str = "string"
    url_key: str = "URL"

WEBLOC_TAGS = PlistTags()
