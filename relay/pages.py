from html import escape

INFO_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8"><meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Config Relay</title>
  <style>body{{font-family:sans-serif;padding:20px;max-width:800px;margin:0 auto;line-height:1.6}}code{{background:#f4f4f4;padding:2px 5px;border-radius:3px}}</style>
</head>
<body>
  <h1>Config Relay is running</h1>
  <p>Service origin: <code>{origin}</code></p>
  <h3>Usage</h3>
  <ul>
    <li><b>Proxy:</b> <code>{origin}/?url=https://example.com/api.php</code></li>
    <li><b>Config JSON:</b> <code>{origin}/?format=1&amp;source=full</code></li>
    <li><b>Formats:</b> <code>0</code>/<code>raw</code>, <code>1</code>/<code>proxy</code>,
      <code>2</code>/<code>base58</code>, <code>3</code>/<code>proxy-base58</code></li>
    <li><b>Sources:</b> <code>jin18</code>, <code>jingjian</code>, <code>full</code></li>
    <li><b>Reserved paths:</b> <code>/health</code> and <code>/metrics</code> answer themselves; send <code>?url=</code> and <code>?format=</code> to any other path.</li>
  </ul>
</body>
</html>"""


def render_info_page(origin: str) -> str:
    return INFO_PAGE_TEMPLATE.format(origin=escape(origin))
