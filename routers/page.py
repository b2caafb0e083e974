from __future__ import annotations

import html
import json

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from bank import list_levels
from render import COPY_FAILED_MSG, COPY_OK_MSG, level_options

router = APIRouter(tags=["page"])

_STYLE = """
    :root { --accent: #2f6f4f; --muted: #eef3f0; }
    body { font: 15px/1.5 system-ui, sans-serif; color: #222; background: var(--muted); }
    main { max-width: 46rem; margin: 2rem auto; padding: 1.5rem 2rem; background: #fff; border: 1px solid #d5ded9; }
    form { display: grid; gap: 0.4rem; }
    form label { font-weight: 600; margin-top: 0.6rem; }
    form input, form select { padding: 0.45rem; font: inherit; }
    button { justify-self: start; margin-top: 0.8rem; padding: 0.45rem 1.2rem; color: #fff; background: var(--accent); border: 0; cursor: pointer; }
    .qa-item { margin-top: 0.8rem; padding: 0.6rem 0.8rem; border-left: 3px solid var(--accent); background: var(--muted); }
    .qa-item span { display: block; }
    .error { color: #a4262c; }
"""

# Items of the last successful generation are the only copy source.
_SCRIPT = """
let lastItems = [];

function showError(msg) {
  document.getElementById('error-message').innerHTML = '';
  const p = document.createElement('p');
  p.className = 'error';
  p.textContent = msg;
  document.getElementById('error-message').appendChild(p);
}

function renderItems(level, items) {
  const box = document.getElementById('qa-results-container');
  box.innerHTML = '';
  const h = document.createElement('h2');
  h.textContent = `Generated Q&A Set (${level})`;
  box.appendChild(h);
  const btn = document.createElement('button');
  btn.textContent = 'Copy All Q&A';
  btn.type = 'button';
  btn.addEventListener('click', copyResults);
  box.appendChild(btn);
  for (const it of items) {
    const div = document.createElement('div');
    div.className = 'qa-item';
    const q = document.createElement('span');
    q.textContent = `Question ${it.ordinal}: ${it.question}`;
    const a = document.createElement('span');
    a.textContent = `Answer Hint: ${it.answer_hint}`;
    div.appendChild(q);
    div.appendChild(a);
    box.appendChild(div);
  }
}

async function handleSubmit(event) {
  event.preventDefault();
  document.getElementById('qa-results-container').innerHTML = '';
  document.getElementById('error-message').innerHTML = '';
  const level = document.getElementById('level').value;
  try {
    const r = await fetch('/generate', {
      method: 'POST',
      headers: {'Content-Type': 'application/json'},
      body: JSON.stringify({
        concepts: document.getElementById('concepts').value,
        level: level,
        num_questions: document.getElementById('num_questions').value,
      }),
    });
    const body = await r.json();
    if (!body.ok) {
      showError(body.error || 'Request failed.');
      return;
    }
    lastItems = body.items.map(it => ({question: it.question, answer_hint: it.answer_hint}));
    renderItems(level, body.items);
  } catch (e) {
    showError(`An unexpected error occurred: ${e.message}`);
  }
}

async function copyResults() {
  try {
    const r = await fetch('/copy', {
      method: 'POST',
      headers: {'Content-Type': 'application/json'},
      body: JSON.stringify({items: lastItems}),
    });
    const body = await r.json();
    if (!body.ok) throw new Error(body.error);
    await navigator.clipboard.writeText(body.text);
    alert(COPY_OK_MSG);
  } catch (err) {
    console.error('Could not copy text: ', err);
    alert(COPY_FAILED_MSG);
  }
}

document.getElementById('qa-form').addEventListener('submit', handleSubmit);
"""


def render_home() -> str:
    """Return the HTML for the generator page."""
    options = "\n".join(
        f'        <option value="{html.escape(o["level"])}">{html.escape(o["label"])}</option>'
        for o in level_options(list_levels())
    )
    messages = (
        f"const COPY_OK_MSG = {json.dumps(COPY_OK_MSG)};\n"
        f"const COPY_FAILED_MSG = {json.dumps(COPY_FAILED_MSG)};\n"
    )
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Q&amp;A Generator</title>
  <style>{_STYLE}</style>
</head>
<body>
  <main>
    <h1>Q&amp;A Generator</h1>
    <form id="qa-form">
      <label for="concepts">Concepts (comma separated):</label>
      <input type="text" id="concepts" name="concepts" placeholder="Welding, Pipe Fitting">

      <label for="level">Level:</label>
      <select id="level" name="level">
{options}
      </select>

      <label for="num_questions">Number of questions:</label>
      <input type="number" id="num_questions" name="num_questions" value="5" min="1">

      <button type="submit">Generate</button>
    </form>
    <div id="error-message"></div>
    <div id="qa-results-container"></div>
  </main>
  <script>
{messages}{_SCRIPT}
  </script>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse)
def home():
    return render_home()
