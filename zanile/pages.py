"""
HTML pages: editor, note view and about.
"""

_HEAD = """<meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <style>
        :root { color-scheme: light dark; }
        body {
            max-width: 800px;
            margin: 2rem auto;
            padding: 0 1rem;
            font-family: system-ui, sans-serif;
        }
        header { display: flex; align-items: center; justify-content: space-between; gap: 1rem; }
        h1 { margin: 0 0 1rem; font-size: 1.2rem; }
        textarea, pre {
            width: 100%;
            box-sizing: border-box;
            font: 14px ui-monospace, SFMono-Regular, Menlo, Consolas, monospace;
            padding: .75rem;
            border-radius: .5rem;
            border: 1px solid #8883;
        }
        textarea { min-height: 50vh; }
        pre { white-space: pre-wrap; word-wrap: break-word; background: #00000008; }
        .row { display: flex; gap: .5rem; margin-top: .75rem; }
        .row > * { flex: 1; }
        input { padding: .6rem .7rem; border-radius: .5rem; border: 1px solid #8883; }
        button, a.button {
            padding: .6rem .9rem;
            border-radius: .5rem;
            border: 1px solid #8885;
            background: #09f;
            color: white;
            cursor: pointer;
            text-decoration: none;
            text-align: center;
        }
        button.secondary { background: transparent; color: inherit; }
        .note { margin-top: .5rem; font-size: .9rem; opacity: .75; }
        .err { color: #c00; }
    </style>"""


def escape_html(text: str) -> str:
    """Escape & < > " ' for embedding in HTML. "&" goes first so nothing is escaped twice."""
    return (
        text
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


def _format_limit(max_bytes: int) -> str:
    if max_bytes >= 1000 and max_bytes % 1000 == 0:
        return f"{max_bytes // 1000} KB"
    return f"{max_bytes} bytes"


def render_home_page(max_bytes: int) -> str:
    """Editor page. Posts JSON to /api/create and shows the share link."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    {_HEAD}
    <title>zanile clipboard</title>
    <meta name="description" content="Minimalist web text clipboard.">
</head>
<body>
    <header>
        <h1>zanile clipboard</h1>
        <nav><a href="/about">About</a></nav>
    </header>
    <form id="form">
        <textarea id="text" placeholder="Paste or type text..."></textarea>
        <div class="row">
            <button id="save" type="submit">Save</button>
            <button id="clear" class="secondary" type="button">Clear</button>
        </div>
        <div class="row">
            <input id="id" type="text" placeholder="Optional custom ID (a-z, 0-9, -), default random">
        </div>
        <div class="note">Max {_format_limit(max_bytes)}. Your note gets a shareable URL.</div>
        <div id="result" class="note"></div>
        <div id="error" class="err"></div>
    </form>
    <script>
        const form = document.getElementById('form');
        const text = document.getElementById('text');
        const idInput = document.getElementById('id');
        const result = document.getElementById('result');
        const error = document.getElementById('error');
        document.getElementById('clear').onclick = () => {{
            text.value = ''; idInput.value = ''; result.textContent = ''; error.textContent = '';
        }};
        form.onsubmit = async (e) => {{
            e.preventDefault();
            result.textContent = ''; error.textContent = '';
            const payload = {{ text: text.value, id: idInput.value || undefined }};
            try {{
                const res = await fetch('/api/create', {{
                    method: 'POST',
                    headers: {{ 'Content-Type': 'application/json' }},
                    body: JSON.stringify(payload),
                }});
                const data = await res.json();
                if (!res.ok) throw new Error(data.error || 'Failed');
                const link = document.createElement('a');
                link.href = data.url;
                link.textContent = data.url;
                result.appendChild(link);
                history.replaceState(null, '', '/' + data.id);
            }} catch (err) {{
                error.textContent = String(err.message || err);
            }}
        }};
    </script>
</body>
</html>"""


def render_view_page(note_id: str, text: str, base_url: str) -> str:
    """Note page: escaped text, share URL with a copy button, raw link."""
    safe_id = escape_html(note_id)
    share_url = escape_html(f"{base_url}/{note_id}")
    raw_url = escape_html(f"{base_url}/raw/{note_id}")

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    {_HEAD}
    <title>{safe_id} - zanile</title>
    <meta name="description" content="Shared note {safe_id}">
</head>
<body>
    <h1>note {safe_id}</h1>
    <pre>{escape_html(text)}</pre>
    <div class="row">
        <input id="share" value="{share_url}" readonly>
        <button onclick="navigator.clipboard.writeText(document.getElementById('share').value)">Copy URL</button>
        <a class="button" href="/">New</a>
        <a class="button" href="{raw_url}">Raw</a>
    </div>
</body>
</html>"""


def render_about_page() -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    {_HEAD}
    <title>About - zanile clipboard</title>
    <meta name="description" content="About this minimalist clipboard app">
    <link rel="canonical" href="/about">
</head>
<body>
    <header>
        <h1>About</h1>
        <nav><a href="/">Home</a></nav>
    </header>
    <p>
        A tiny paste-and-share clipboard. Paste text, save it, and pass the link around.
        Anyone with the link can read the note; notes cannot be edited once saved.
    </p>
    <h2>Tech stack</h2>
    <ul>
        <li><strong>FastAPI</strong> and <strong>uvicorn</strong> serve the pages and the JSON API</li>
        <li><strong>Redis</strong> stores notes, and expires them when a TTL is configured</li>
        <li><strong>Vanilla HTML/CSS/JS</strong> for a zero-dependency UI</li>
    </ul>
    <a class="button" href="/">Create a new note</a>
</body>
</html>"""
