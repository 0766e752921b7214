"""Template generation functions for the Tailwind scaffold."""

import json
import shlex

from .types import ScriptMap

STYLESHEET_LINK_TEMPLATE = '<link href="./dist/{css_file_name}" rel="stylesheet">'


def get_stylesheet_link(css_file_name: str) -> str:
    """Canonical link tag for the built stylesheet."""
    return STYLESHEET_LINK_TEMPLATE.format(css_file_name=css_file_name)


def get_css_entry_template() -> str:
    """Tailwind layer directives for the CSS entry file."""
    return """@tailwind base;
@tailwind components;
@tailwind utilities;
"""


def get_tailwind_config_template() -> str:
    """Generate tailwind.config.js with content globs and empty extension points."""
    return """module.exports = {
  content: [
    './src/**/*.{html,js,jsx,ts,tsx}', // All files in the src directory
    './*.html', // Any HTML files in the root directory
    './**/*.html', // Any HTML files in subdirectories
  ],
  theme: {
    extend: {},
  },
  plugins: [],
};
"""


def get_postcss_config_template(minify: bool = False) -> str:
    """Generate postcss.config.js.

    Args:
        minify: Append cssnano after autoprefixer

    Returns:
        Complete postcss.config.js content as string
    """
    plugins = [
        "    tailwindcss: {},",
        "    autoprefixer: {},",
    ]
    if minify:
        plugins.append("    cssnano: { preset: 'default' },")

    plugin_block = "\n".join(plugins)
    return f"""module.exports = {{
  plugins: {{
{plugin_block}
  }},
}};
"""


def get_html_template(css_file_name: str) -> str:
    """Generate a minimal HTML page that proves Tailwind is wired up.

    Args:
        css_file_name: Name of the built stylesheet under ./dist/

    Returns:
        Complete HTML document as string
    """
    link = get_stylesheet_link(css_file_name)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Tailwind CSS Test</title>
    {link}
</head>
<body class="bg-gray-100">
    <div class="max-w-2xl mx-auto mt-10">
        <h1 class="text-3xl font-bold text-center text-blue-500">Tailwind CSS is working!</h1>
        <p class="text-center text-gray-600 mt-4">This is a basic HTML template styled with Tailwind CSS.</p>
    </div>
</body>
</html>
"""


def create_prettier_config() -> dict[str, object]:
    """Prettier settings written to .prettierrc."""
    return {
        "semi": True,
        "singleQuote": True,
        "tabWidth": 2,
        "trailingComma": "es5",
        "printWidth": 100,
    }


def create_eslint_config(accessibility: bool = False) -> dict[str, object]:
    """ESLint settings written to .eslintrc.json.

    With ``accessibility`` the jsx-a11y plugin and its recommended rules are
    added on top of the base config.
    """
    extends = ["eslint:recommended"]
    plugins: list[str] = []
    if accessibility:
        extends.append("plugin:jsx-a11y/recommended")
        plugins.append("jsx-a11y")

    config: dict[str, object] = {
        "root": True,
        "env": {
            "browser": True,
            "es2021": True,
            "node": True,
        },
        "parserOptions": {
            "ecmaVersion": "latest",
            "sourceType": "module",
            "ecmaFeatures": {"jsx": True},
        },
        "extends": extends,
    }
    if plugins:
        config["plugins"] = plugins
    config["rules"] = {}
    return config


def get_json_template(document: dict[str, object]) -> str:
    """Serialize a static JSON config the way generated files are written."""
    return json.dumps(document, indent=2) + "\n"


def get_build_scripts(css_source: str, css_output: str) -> ScriptMap:
    """Core build script, pointing at the CSS file that was actually written."""
    css_source, css_output = shlex.quote(css_source), shlex.quote(css_output)
    return {
        "build:css": f"tailwindcss build {css_source} -o {css_output}",
    }


def get_automation_scripts(css_source: str, css_output: str) -> ScriptMap:
    """Watch and minified build scripts for the automated CSS build."""
    css_source, css_output = shlex.quote(css_source), shlex.quote(css_output)
    return {
        "watch:css": f"tailwindcss -i {css_source} -o {css_output} --watch",
        "build:css:prod": f"tailwindcss -i {css_source} -o {css_output} --minify",
    }
