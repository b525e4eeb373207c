"""FastAPI web app for lead-gen asset generation."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response

from .backends import TextBackend, select_backend
from .config import load_settings
from .errors import GenerationError, LeadGenError, ValidationError
from .export import CSV_FILENAME, outreach_csv
from .main import build_assets_async

logger = logging.getLogger(__name__)


def create_app(backend: TextBackend | None = None) -> FastAPI:
    """Build the app. The backend is chosen once here, from settings unless given."""
    app = FastAPI(title="Lead-Gen Asset Generator")
    app.state.backend = backend if backend is not None else select_backend(load_settings())

    @app.exception_handler(LeadGenError)
    async def leadgen_error(request: Request, exc: LeadGenError):
        if isinstance(exc, GenerationError):
            logger.warning("Generation failed: %s", exc)
            message = f"Failed to generate assets ({exc.reason})"
        else:
            message = str(exc)
        return JSONResponse({"error": message}, status_code=400)

    @app.get("/", response_class=HTMLResponse)
    async def index():
        return INDEX_HTML

    @app.post("/api/agent")
    async def agent(request: Request):
        """Validate the profile and return the generated asset bundle."""
        payload = await _read_json(request)
        bundle = await build_assets_async(payload, request.app.state.backend)
        return bundle.to_dict()

    @app.post("/api/agent/csv")
    async def agent_csv(request: Request):
        """Same input as /api/agent; returns only the outreach rows as a CSV download."""
        payload = await _read_json(request)
        bundle = await build_assets_async(payload, request.app.state.backend)
        return Response(
            outreach_csv(bundle.personalized),
            media_type="text/csv; charset=utf-8",
            headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'},
        )

    return app


async def _read_json(request: Request):
    try:
        return await request.json()
    except ValueError:
        raise ValidationError(["body"], "Request body must be valid JSON") from None


# ---------------------------------------------------------------------------
# Inline HTML: single page app
# ---------------------------------------------------------------------------

INDEX_HTML = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Lead-Gen Asset Generator</title>
<style>
  *, *::before, *::after { margin: 0; padding: 0; box-sizing: border-box; }

  body {
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
    background: #f0f2f5;
    color: #1a1a2e;
    min-height: 100vh;
    padding: 32px 20px;
  }

  .layout {
    display: grid;
    grid-template-columns: 1fr;
    gap: 24px;
    max-width: 1100px;
    margin: 0 auto;
  }

  @media (min-width: 860px) {
    .layout { grid-template-columns: 340px 1fr; }
  }

  .card {
    background: white;
    border-radius: 16px;
    box-shadow: 0 1px 3px rgba(0,0,0,0.08), 0 8px 24px rgba(0,0,0,0.06);
    padding: 28px;
  }

  h1 { font-size: 22px; font-weight: 700; margin-bottom: 6px; }
  h3 { font-size: 15px; font-weight: 600; margin: 14px 0 8px; }

  .subtitle { font-size: 13px; color: #6b7280; margin-bottom: 20px; }

  label {
    display: block;
    font-size: 13px;
    font-weight: 600;
    color: #4a5568;
    margin: 14px 0 6px;
  }

  input[type="text"], select {
    width: 100%;
    padding: 10px 14px;
    border: 1px solid #d1d5db;
    border-radius: 10px;
    font-size: 14px;
    outline: none;
    background: white;
  }

  input[type="text"]:focus, select:focus {
    border-color: #4ecdc4;
    box-shadow: 0 0 0 3px rgba(78,205,196,0.15);
  }

  button {
    padding: 10px 20px;
    background: #1a1a2e;
    color: white;
    border: none;
    border-radius: 10px;
    font-size: 14px;
    font-weight: 600;
    cursor: pointer;
  }

  button:hover { background: #2a2a4e; }
  button:disabled { background: #9ca3af; cursor: not-allowed; }

  #generate { width: 100%; margin-top: 20px; }

  .tabs { display: flex; flex-wrap: wrap; gap: 8px; margin-bottom: 16px; }

  .tab {
    background: #f3f4f6;
    color: #374151;
    padding: 8px 14px;
    font-size: 13px;
  }

  .tab:hover { background: #e5e7eb; }
  .tab[data-active="true"] { background: #1a1a2e; color: white; }

  pre {
    white-space: pre-wrap;
    font-family: inherit;
    font-size: 14px;
    background: #f9fafb;
    border-radius: 8px;
    padding: 12px;
  }

  .variant { border: 1px solid #e5e7eb; border-radius: 8px; padding: 12px; margin-bottom: 10px; }
  .variant-label { font-size: 11px; font-weight: 600; color: #6b7280; margin-bottom: 6px; }

  ul, ol { padding-left: 22px; font-size: 14px; }
  li { margin: 4px 0; }

  .table-wrap { overflow: auto; border: 1px solid #e5e7eb; border-radius: 8px; margin-top: 12px; }
  table { border-collapse: collapse; min-width: 100%; font-size: 12px; text-align: left; }
  th { background: #f9fafb; color: #4b5563; font-weight: 600; padding: 8px 10px; }
  td { padding: 8px 10px; vertical-align: top; white-space: pre-wrap; }
  tr:nth-child(even) td { background: #f9fafb; }

  .csv-head { display: flex; justify-content: space-between; align-items: center; }

  .placeholder { text-align: center; color: #6b7280; font-size: 14px; padding: 64px 16px; }

  .error-msg {
    margin-top: 16px;
    padding: 12px 16px;
    background: #fef2f2;
    border: 1px solid #fecaca;
    border-radius: 10px;
    color: #991b1b;
    font-size: 14px;
    display: none;
  }
</style>
</head>
<body>
<div class="layout">
  <section class="card">
    <h1>Lead-Gen Assets</h1>
    <p class="subtitle">Describe the business to generate outreach and landing copy.</p>

    <form id="form">
      <label for="businessName">Business name</label>
      <input type="text" id="businessName" placeholder="Acme Solar">

      <label for="industry">Industry</label>
      <input type="text" id="industry" placeholder="Solar energy, SaaS, Healthcare, etc.">

      <label for="targetAudience">Target audience</label>
      <input type="text" id="targetAudience" placeholder="e.g. Property managers in California">

      <label for="offer">Core offer</label>
      <input type="text" id="offer" placeholder="e.g. Cut energy bills by 30% in 90 days">

      <label for="tone">Tone</label>
      <select id="tone">
        <option value="professional">Professional</option>
        <option value="friendly">Friendly</option>
        <option value="bold">Bold</option>
        <option value="technical">Technical</option>
      </select>

      <label for="website">Website (optional)</label>
      <input type="text" id="website" placeholder="https://acmesolar.com">

      <button type="submit" id="generate" disabled>Generate assets</button>
    </form>

    <div class="error-msg" id="error"></div>
  </section>

  <section class="card">
    <div id="empty" class="placeholder">
      Fill in your business details to generate ICP, messaging, cold emails, ads, landing
      copy, discovery questions, call script, and a personalized outreach CSV.
    </div>
    <div id="result" style="display:none">
      <div class="tabs" id="tabs"></div>
      <div id="panel"></div>
    </div>
  </section>
</div>

<script>
const FIELDS = ['businessName', 'industry', 'targetAudience', 'offer', 'tone', 'website'];
const REQUIRED = ['businessName', 'industry', 'targetAudience', 'offer'];
const TABS = [
  ['overview', 'Overview'],
  ['emails', 'Cold Emails'],
  ['ads', 'Ad Headlines'],
  ['landing', 'Landing Copy'],
  ['discovery', 'Discovery Qs'],
  ['call', 'Call Script'],
  ['csv', 'CSV Outreach'],
];
const CSV_HEADER = ['company', 'contact_name', 'title', 'email', 'personalized_intro', 'email_variant', 'cta'];
const CSV_KEYS = ['company', 'contactName', 'title', 'email', 'personalizedIntro', 'emailVariant', 'cta'];

const form = document.getElementById('form');
const btn = document.getElementById('generate');
const errorEl = document.getElementById('error');
let result = null;
let activeTab = 'overview';

function values() {
  const v = {};
  for (const f of FIELDS) v[f] = document.getElementById(f).value.trim();
  return v;
}

function canGenerate() {
  const v = values();
  return REQUIRED.every((f) => v[f]);
}

form.addEventListener('input', () => { btn.disabled = !canGenerate(); });

function el(tag, text, cls) {
  const e = document.createElement(tag);
  if (text !== undefined) e.textContent = text;
  if (cls) e.className = cls;
  return e;
}

function list(tag, items) {
  const l = el(tag);
  for (const item of items) l.appendChild(el('li', item));
  return l;
}

function csvText(rows) {
  const all = [CSV_HEADER, ...rows.map((r) => CSV_KEYS.map((k) => r[k]))];
  return all
    .map((r) => r.map((c) => '"' + String(c ?? '').replaceAll('"', '""') + '"').join(','))
    .join('\\n');
}

function downloadCSV() {
  if (!result || !result.personalized) return;
  const blob = new Blob([csvText(result.personalized)], { type: 'text/csv;charset=utf-8;' });
  const url = URL.createObjectURL(blob);
  const a = document.createElement('a');
  a.href = url;
  a.download = 'leadgen_personalized_outreach.csv';
  a.click();
  URL.revokeObjectURL(url);
}

function renderPanel() {
  const panel = document.getElementById('panel');
  panel.innerHTML = '';

  if (activeTab === 'overview') {
    panel.appendChild(el('h3', 'Ideal Customer Profile'));
    panel.appendChild(el('pre', result.icp));
    panel.appendChild(el('h3', 'Value Proposition'));
    panel.appendChild(el('pre', result.valueProp));
  } else if (activeTab === 'emails') {
    result.emails.forEach((e, i) => {
      const box = el('div', undefined, 'variant');
      box.appendChild(el('div', 'Variant ' + (i + 1), 'variant-label'));
      box.appendChild(el('pre', e));
      panel.appendChild(box);
    });
  } else if (activeTab === 'ads') {
    panel.appendChild(list('ul', result.adHeadlines));
  } else if (activeTab === 'landing') {
    panel.appendChild(el('h3', 'Hero'));
    panel.appendChild(el('pre', result.landing.hero));
    panel.appendChild(el('h3', 'Sections'));
    for (const s of result.landing.sections) {
      const box = el('div', undefined, 'variant');
      box.appendChild(el('div', s.title, 'variant-label'));
      box.appendChild(el('pre', s.body));
      panel.appendChild(box);
    }
  } else if (activeTab === 'discovery') {
    panel.appendChild(list('ol', result.discoveryQuestions));
  } else if (activeTab === 'call') {
    panel.appendChild(list('ul', result.callScriptBullets));
  } else if (activeTab === 'csv') {
    const head = el('div', undefined, 'csv-head');
    head.appendChild(el('div', 'Personalized outreach set \\u00b7 Rows: ' + result.personalized.length));
    const dl = el('button', 'Download CSV');
    dl.addEventListener('click', downloadCSV);
    head.appendChild(dl);
    panel.appendChild(head);

    const wrap = el('div', undefined, 'table-wrap');
    const table = el('table');
    const tr = el('tr');
    for (const h of ['Company', 'Name', 'Title', 'Email', 'Intro', 'Variant', 'CTA']) tr.appendChild(el('th', h));
    table.appendChild(tr);
    for (const r of result.personalized) {
      const row = el('tr');
      for (const k of CSV_KEYS) row.appendChild(el('td', r[k]));
      table.appendChild(row);
    }
    wrap.appendChild(table);
    panel.appendChild(wrap);
  }
}

function renderTabs() {
  const tabs = document.getElementById('tabs');
  tabs.innerHTML = '';
  for (const [id, label] of TABS) {
    const t = el('button', label, 'tab');
    t.type = 'button';
    t.dataset.active = String(activeTab === id);
    t.addEventListener('click', () => { activeTab = id; renderTabs(); renderPanel(); });
    tabs.appendChild(t);
  }
}

form.addEventListener('submit', async (e) => {
  e.preventDefault();
  errorEl.style.display = 'none';
  if (!canGenerate()) {
    errorEl.textContent = 'Please fill all required fields.';
    errorEl.style.display = 'block';
    return;
  }

  btn.disabled = true;
  btn.textContent = 'Generating...';
  try {
    const res = await fetch('/api/agent', {
      method: 'POST',
      headers: { 'Content-Type': 'application/json' },
      body: JSON.stringify(values()),
    });
    const data = await res.json();
    if (!res.ok) throw new Error(data.error || 'Failed to generate');
    result = data;
    activeTab = 'overview';
    document.getElementById('empty').style.display = 'none';
    document.getElementById('result').style.display = 'block';
    renderTabs();
    renderPanel();
  } catch (err) {
    errorEl.textContent = err.message || 'Failed to generate';
    errorEl.style.display = 'block';
  } finally {
    btn.disabled = !canGenerate();
    btn.textContent = 'Generate assets';
  }
});
</script>
</body>
</html>
"""

app = create_app()
