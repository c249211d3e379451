VERSION = "0.4.0"

# separator used to build full names out of path prefixes and names
NAME_SEPARATOR = "-"
# suffix appended to a list's full name to form the prefix of its items
ITEM_PREFIX_SUFFIX = "-n"

# default attribute names of externally produced error objects
POINTER_ATTR_NAME = "dataPath"
MESSAGE_ATTR_NAME = "message"

# editor kinds inferred from the schema when no 'editor' keyword is present
EDITOR_SELECT = "Select"
EDITOR_CHECKBOX = "Checkbox"
EDITOR_DATE_PICKER = "DatePicker"
EDITOR_TEXT = "Text"

LOGGING_LEVEL_DEFAULT = "notice"
