"""Static polling page served at the site root."""

from __future__ import annotations

_PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8" />
<title>ASCII Clock</title>
<style>
  body {{ background: #000; color: #fff; font-family: "Courier New", monospace;
         font-size: 8px; font-weight: bold; }}
</style>
<script>
  window.onload = function () {{
    var pauseTicks = 0;
    var xhr = new XMLHttpRequest();
    xhr.onreadystatechange = function () {{
      if (xhr.readyState !== 4) {{
        return;
      }}
      if (xhr.status === 200) {{
        document.getElementById("clock").textContent = xhr.responseText;
      }} else {{
        pauseTicks = {pause_ticks};
      }}
    }};

    setInterval(function () {{
      if (pauseTicks > 0) {{
        pauseTicks--;
        return;
      }}
      // Shift to the browser's wall clock; the server reads it back as UTC.
      var date = new Date();
      var time = (date.getTime() / 1000) - (date.getTimezoneOffset() * 60);
      xhr.open("GET", "?tick=1&time=" + time, true);
      xhr.send();
    }}, {poll_ms});
  }};
</script>
</head>
<body>
<h1>ASCII Art Clock</h1>
<p>Ticks are requested every {poll_ms}ms, so they can look erratic.</p>
<pre id="clock">Clock goes here</pre>
</body>
</html>
"""


def build_page(poll_ms: int = 900, pause_ticks: int = 5) -> str:
    return _PAGE_TEMPLATE.format(poll_ms=int(poll_ms), pause_ticks=int(pause_ticks))
