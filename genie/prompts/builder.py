"""Prompt Builder - Construct Gemini prompts for commit message generation."""

from genie import COMMIT_TYPES, COMMIT_EMOJIS
from genie.git import ChangeSet

EXCELLENT_EXAMPLES = """\
✨ feat(auth): add OAuth2 Google integration
🐛 fix(api): handle null response in user endpoint
♻️ refactor(utils): simplify date formatting logic
📝 docs: update API authentication guide
🔧 chore(deps): update React to v18.2.0
⚡ perf(db): optimize user query with indexing
🎨 ui: improve button hover animations
🔒 security: sanitize user input in forms"""


class PromptBuilder:
    """Constructs the single prompt sent to the completion endpoint.

    build() is pure: identical inputs always produce identical text.
    """

    def build(self, changes: ChangeSet, context: str | None = None) -> str:
        sections = [
            self._build_role_section(),
            self._build_analysis_section(),
            self._build_rules_section(),
            self._build_types_section(),
            self._build_emoji_section(),
            self._build_context_section(context),
            self._build_changes_section(changes),
            self._build_final_instructions(),
        ]
        return "\n\n".join(filter(None, sections))

    def _build_role_section(self) -> str:
        return ("You are a world-class senior software engineer and git expert with years of "
                "experience writing perfect, professional commit messages. Your task is to "
                "analyze git changes and generate the ideal commit message.")

    def _build_analysis_section(self) -> str:
        return """ANALYSIS REQUIREMENTS:
- Carefully examine the git diff and status to understand what actually changed
- Identify the primary purpose and impact of the changes
- Consider the scope and complexity of modifications
- Determine if this is a feature, fix, refactor, or other type of change"""

    def _build_rules_section(self) -> str:
        return """COMMIT MESSAGE RULES:
1. 🎯 START WITH APPROPRIATE EMOJI: Choose the most relevant emoji that represents the change type
2. 📏 FORMAT: Use conventional commit format: "emoji type(scope): description"
3. 🔤 IMPERATIVE MOOD: Use imperative mood ("add" not "added", "fix" not "fixed")
4. 📐 LENGTH: Keep first line under 50 characters when possible, maximum 72
5. 🎯 BE SPECIFIC: Focus on WHAT changed and WHY, not HOW
6. 🚫 NO FILENAMES: Don't mention specific files unless absolutely crucial
7. 💡 CLARITY: Make it immediately clear what the commit accomplishes
8. 🏷️ SCOPE: Include scope in parentheses when it adds clarity (e.g., auth, api, ui)"""

    def _build_types_section(self) -> str:
        types_list = "\n".join(f"- {t}: {desc}" for t, desc in COMMIT_TYPES.items())
        return f"CONVENTIONAL COMMIT TYPES:\n{types_list}"

    def _build_emoji_section(self) -> str:
        guide = "\n".join(f"{emoji} {keyword}: {usage}" for keyword, (emoji, usage) in COMMIT_EMOJIS.items())
        return f"EMOJI SELECTION GUIDE:\n{guide}"

    def _build_context_section(self, context: str | None) -> str:
        if not context or not context.strip():
            return ""

        return f"""🎯 DEVELOPER CONTEXT:
The developer provided this context: "{context}"

This context is CRITICAL - use it to understand the broader purpose and ensure your commit message accurately reflects the intended changes within this context. The context should guide your interpretation of what these technical changes accomplish at a higher level."""

    def _build_changes_section(self, changes: ChangeSet) -> str:
        description = changes.kind.description if changes.kind else "changes"
        return f"""📊 CHANGE ANALYSIS:
You are analyzing: {description}

Git Status Output:
{changes.status}

Git Diff/Changes:
{changes.diff}"""

    def _build_final_instructions(self) -> str:
        return f"""🎯 RESPONSE FORMAT:
Respond with ONLY the commit message including emoji. No explanations, quotes, or additional text.

EXAMPLES OF EXCELLENT COMMIT MESSAGES:
{EXCELLENT_EXAMPLES}

Generate the perfect commit message now:"""
