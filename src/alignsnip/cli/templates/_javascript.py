"""Browser JavaScript snippet: fetch with top-level await."""

from alignsnip.cli.templates._base import js_array, single_quoted
from alignsnip.core.config import TaskOptions


def render(api_key: str, source_url: str, options: TaskOptions) -> str:
    key = single_quoted(api_key)
    base = single_quoted(options.base_url)
    model = single_quoted(options.model)
    fmt = single_quoted(options.result_format)

    return f"""\
// Define checkStatus BEFORE using it

const checkStatus = async (taskId) => {{
    const response = await fetch(`{base}/tasks/${{taskId}}`, {{
        headers: {{ 'x-api-key': '{key}' }}
    }});
    const task = await response.json();

    // Find alignment target
    const alignmentTarget = task.targets.find(t => t.model === '{model}');
    if (alignmentTarget && alignmentTarget.status === 'completed') {{
        const output = alignmentTarget.output.find(o => o.format === '{fmt}');
        console.log('Alignment URL:', output.link);
    }}
    return task;
}};

// Create alignment task
const response = await fetch('{base}/tasks', {{
    method: 'POST',
    headers: {{
        'x-api-key': '{key}',
        'Content-Type': 'application/json'
    }},
    body: JSON.stringify({{
        url: '{single_quoted(source_url)}',
        targets: [
            {{
                model: '{model}',
                formats: {js_array(options.formats)},
                language: '{single_quoted(options.language)}'
            }}
        ]
    }})
}});

const task = await response.json();
console.log('Full response:', task);
console.log('Task ID:', task.id);

if (task.id) {{
    const pollResult = await checkStatus(task.id);
    console.log('Running Task ID:', pollResult.id);
}} else {{
    console.error('No task ID received. Check API response:', task);
}}
"""
