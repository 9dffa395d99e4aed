"""Python snippet: requests with a polling loop."""

from alignsnip.cli.templates._base import js_array, single_quoted
from alignsnip.core.config import TaskOptions


def render(api_key: str, source_url: str, options: TaskOptions) -> str:
    key = single_quoted(api_key)
    url = single_quoted(source_url)
    base = single_quoted(options.base_url)
    model = single_quoted(options.model)
    fmt = single_quoted(options.result_format)

    return f"""\
import requests
import time

# Create alignment task
response = requests.post(
    '{base}/tasks',
    headers={{
        'x-api-key': '{key}',
        'Content-Type': 'application/json'
    }},
    json={{
        'url': '{url}',
        'targets': [
            {{
                'model': '{model}',
                'formats': {js_array(options.formats)},
                'language': '{single_quoted(options.language)}'
            }}
        ]
    }}
)

task = response.json()
task_id = task['id']

# Poll for completion
while True:
    status = requests.get(
        f'{base}/tasks/{{task_id}}',
        headers={{'x-api-key': '{key}'}}
    ).json()

    # Find alignment target
    alignment_target = next(t for t in status['targets'] if t['model'] == '{model}')

    if alignment_target['status'] == 'completed':
        output = next(o for o in alignment_target['output'] if o['format'] == '{fmt}')
        print('Alignment URL:', output['link'])
        break

    if alignment_target['status'] == 'failed':
        raise RuntimeError(alignment_target.get('error', 'Task failed'))

    time.sleep(2)
"""
