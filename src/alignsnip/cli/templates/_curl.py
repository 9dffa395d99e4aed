"""curl snippet: create the task, then check its status."""

from alignsnip.cli.templates._base import shell_double_quoted, shell_json_array, shell_json_string
from alignsnip.core.config import TaskOptions


def render(api_key: str, source_url: str, options: TaskOptions) -> str:
    key = shell_double_quoted(api_key)
    base = options.base_url

    return f"""\
# Create alignment task
curl -X POST {base}/tasks \\
  -H "x-api-key: {key}" \\
  -H "Content-Type: application/json" \\
  -d '{{
    "url": "{shell_json_string(source_url)}",
    "targets": [
      {{
        "model": "{shell_json_string(options.model)}",
        "formats": {shell_json_array(options.formats)},
        "language": "{shell_json_string(options.language)}"
      }}
    ]
  }}'

# Get task status (replace TASK_ID with the "id" returned above)
curl {base}/tasks/TASK_ID \\
  -H "x-api-key: {key}"
"""
