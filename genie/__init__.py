"""
Genie

AI-powered commit message generation from git changes using Google Gemini.
"""

__version__ = "1.0.0"

APP_NAME = "genie"

# Conventional commit types offered to the model
COMMIT_TYPES = {
    'feat': 'New features or enhancements',
    'fix': 'Bug fixes and corrections',
    'docs': 'Documentation changes',
    'style': 'Code formatting, whitespace, styling',
    'refactor': 'Code restructuring without functionality changes',
    'test': 'Adding or modifying tests',
    'chore': 'Maintenance, build process, dependencies',
    'perf': 'Performance improvements',
    'ci': 'CI/CD pipeline changes',
    'build': 'Build system, external dependencies',
    'revert': 'Reverting previous changes',
}

# Emoji guide: keyword -> (emoji, when to use it)
# The first fifteen entries are the core set every message type maps onto
COMMIT_EMOJIS = {
    'feat': ('✨', 'new features, enhancements'),
    'fix': ('🐛', 'bug fixes, error corrections'),
    'docs': ('📝', 'documentation, README updates'),
    'style': ('💄', 'formatting, code style, UI styling'),
    'refactor': ('♻️', 'code refactoring, restructuring'),
    'test': ('✅', 'adding/updating tests'),
    'chore': ('🔧', 'maintenance, config, build'),
    'perf': ('⚡', 'performance optimizations'),
    'ci': ('👷', 'CI/CD, workflows, automation'),
    'build': ('📦', 'build system, dependencies'),
    'deploy': ('🚀', 'deployment, releases'),
    'security': ('🔒', 'security fixes, improvements'),
    'ui': ('🎨', 'UI/UX improvements, design'),
    'database': ('🗃️', 'database changes, migrations'),
    'remove': ('🔥', 'removing code, files, features'),
    'hotfix': ('🩹', 'critical fixes'),
    'move': ('🚚', 'moving or renaming files'),
    'responsive': ('📱', 'mobile/responsive changes'),
    'i18n': ('🌐', 'internationalization, localization'),
    'logging': ('🔊', 'adding or updating logs'),
    'mute': ('🔇', 'removing logs'),
    'contributor': ('👥', 'adding contributors'),
    'accessibility': ('🚸', 'improving accessibility'),
    'green': ('💚', 'fixing CI, improving build'),
    'release': ('🔖', 'version tags, releases'),
    'warning': ('🚨', 'fixing warnings, linter issues'),
    'wip': ('🚧', 'work in progress'),
    'breaking': ('💥', 'breaking changes'),
    'analytics': ('📈', 'adding analytics, tracking'),
    'auth': ('🔐', 'authentication, authorization'),
    'global': ('🌍', 'global changes, configurations'),
}
