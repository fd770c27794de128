"""Single-page front end: home, image upload, symptom form and results views."""
from __future__ import annotations

import html

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from cropcare.config import get_settings
from cropcare.services.diseases import CROP_TYPES

router = APIRouter()
settings = get_settings()

PAGE_TEMPLATE = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{title}</title>
<style>
  body {{ font-family: system-ui, sans-serif; background: #f0fdf4; margin: 0; color: #1f2937; }}
  header, footer {{ background: #166534; color: #fff; padding: 1rem 2rem; }}
  main {{ max-width: 56rem; margin: 2rem auto; padding: 0 1rem; }}
  .card {{ background: #fff; border-radius: .5rem; box-shadow: 0 1px 4px #0002; padding: 1.5rem; margin-bottom: 1rem; }}
  .hidden {{ display: none; }}
  .error {{ background: #fef2f2; color: #991b1b; border: 1px solid #fecaca; }}
  .info {{ background: #eff6ff; color: #1e40af; border: 1px solid #bfdbfe; }}
  .msg {{ padding: .75rem 1rem; border-radius: .5rem; margin-bottom: .75rem; }}
  button {{ background: #16a34a; color: #fff; border: 0; border-radius: .5rem; padding: .75rem 1.5rem; cursor: pointer; }}
  button:disabled {{ background: #9ca3af; }}
  select, textarea {{ width: 100%; padding: .5rem; margin: .5rem 0 1rem; box-sizing: border-box; }}
</style>
</head>
<body>
<header><h1>{title}</h1><p>Smart Disease Detection &amp; Treatment</p></header>
<main>
  <div id="messages"></div>

  <section id="home" class="card">
    <h2>Choose Your Analysis Method</h2>
    <button onclick="show('image')">Start Image Analysis</button>
    <button onclick="show('text')">Start Text Analysis</button>
  </section>

  <section id="image" class="card hidden">
    <h2>Image Analysis</h2>
    <p>Accepted: JPG/PNG up to {max_mb} MB, min size {min_dim}&times;{min_dim}. Non-plant images will be rejected.</p>
    <input type="file" id="file" accept="image/*">
    <label>Crop type (optional)<select id="image-crop">{crop_options}</select></label>
    <button id="analyze-image" onclick="analyzeImage()">Analyze Crop Image</button>
    <p><a href="#" onclick="show('home')">&larr; Back to Analysis Options</a></p>
  </section>

  <section id="text" class="card hidden">
    <h2>Symptom Analysis</h2>
    <label>Crop type<select id="text-crop">{crop_options}</select></label>
    <label>Describe symptoms (optional)<textarea id="symptoms" rows="4"></textarea></label>
    <button id="analyze-text" onclick="analyzeText()">Analyze Symptoms</button>
    <p><a href="#" onclick="show('home')">&larr; Back to Analysis Options</a></p>
  </section>

  <section id="results" class="card hidden">
    <h2>Analysis Results</h2>
    <div id="result-body"></div>
    <button onclick="resetAnalysis()">New Analysis</button>
  </section>
</main>
<footer>Empowering farmers with intelligent crop disease detection.</footer>
<script>
function show(view, keepMessages) {{
  for (const id of ["home", "image", "text", "results"]) {{
    document.getElementById(id).classList.toggle("hidden", id !== view);
  }}
  if (!keepMessages) setMessages(null, view === "image"
    ? "Upload a clear photo of a leaf or plant. Blurry or non-plant images will be rejected." : null);
}}
function setMessages(error, info) {{
  const box = document.getElementById("messages");
  box.innerHTML = "";
  for (const [cls, text] of [["error", error], ["info", info]]) {{
    if (!text) continue;
    const div = document.createElement("div");
    div.className = "msg " + cls;
    div.textContent = text;
    box.appendChild(div);
  }}
}}
function renderDisease(d) {{
  const body = document.getElementById("result-body");
  body.innerHTML = "";
  const add = (tag, text) => {{ const el = document.createElement(tag); el.textContent = text; body.appendChild(el); }};
  add("h3", d.name);
  add("p", d.severity + " Severity - " + d.confidence + "% confidence");
  add("p", d.description);
  add("h4", "Treatments");
  for (const t of d.treatments) add("p", "[" + t.type + "] " + t.name + ": " + t.dosage + ", " + t.application + " (" + t.timing + ")");
  add("h4", "Prevention");
  for (const p of d.prevention) add("p", "- " + p);
}}
const SUBMIT_FAILED = "Analysis failed. Please check your connection and try again.";
function resetAnalysis() {{
  document.getElementById("file").value = "";
  document.getElementById("symptoms").value = "";
  document.getElementById("image-crop").value = "";
  document.getElementById("text-crop").value = "";
  document.getElementById("result-body").innerHTML = "";
  show("home");
}}
async function submit(url, form, button) {{
  button.disabled = true;
  try {{
    const res = await fetch(url, {{ method: "POST", body: form }});
    const data = await res.json();
    if (!data.disease) {{
      setMessages(data.error || data.detail || "Wrong image. Please upload a clear crop/leaf photo.", null);
      return;
    }}
    renderDisease(data.disease);
    show("results", true);
    setMessages(data.error, data.info);
  }} catch (err) {{
    setMessages(SUBMIT_FAILED, null);
  }} finally {{
    button.disabled = false;
  }}
}}
function analyzeImage() {{
  const file = document.getElementById("file").files[0];
  if (!file) return;
  const form = new FormData();
  form.append("file", file);
  form.append("crop_type", document.getElementById("image-crop").value);
  submit("/api/analyze/image", form, document.getElementById("analyze-image"));
}}
function analyzeText() {{
  const form = new FormData();
  form.append("symptoms", document.getElementById("symptoms").value);
  form.append("crop_type", document.getElementById("text-crop").value);
  submit("/api/analyze/text", form, document.getElementById("analyze-text"));
}}
</script>
</body>
</html>
"""


def render_page() -> str:
    options = ['<option value="">Select crop type</option>'] + [
        f'<option value="{html.escape(c)}">{html.escape(c)}</option>' for c in CROP_TYPES
    ]
    return PAGE_TEMPLATE.format(
        title=html.escape(settings.app_title),
        max_mb=f"{settings.max_image_mb:g}",
        min_dim=settings.min_dimension_px,
        crop_options="".join(options),
    )


@router.get("/", response_class=HTMLResponse)
async def index():
    return HTMLResponse(content=render_page())
