MARKER_COMMENT = '#'
MARKER_DOCSTRING = ('"""', "'''")

COMMENT_PARSING_THEME_STORY = 'theme-story'

DEFAULT_LANGUAGE = 'en'

TAG_PREFIX = '@'
TAG_THEME_PREFIX = '@T_'
TAG_STORY_PREFIX = '@B_'
TAG_STORY_PREFIX_LEGACY = '@B'
