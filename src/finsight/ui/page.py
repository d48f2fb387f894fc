"""Single-page browser UI.

The page runs the same two-phase flow as ``AnalysisSession``: it calls
``/api/sec/filings/{ticker}``, renders the filings panel, then calls
``/api/summary/{ticker}`` and renders the Markdown summary. The submit
control stays disabled until both phases finish.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

HTML = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>FinSight AI</title>
<script src="https://cdn.jsdelivr.net/npm/marked@12.0.2/marked.min.js"></script>
<script src="https://cdn.jsdelivr.net/npm/dompurify@3.1.6/dist/purify.min.js"></script>
<style>
*{box-sizing:border-box}
body{margin:0;font-family:system-ui,-apple-system,sans-serif;background:#fafafa;color:#18181b}
header{background:#fff;border-bottom:1px solid #e4e4e7;padding:0 24px;height:64px;display:flex;align-items:center}
header h1{font-size:20px;font-weight:600;margin:0}
main{max-width:1024px;margin:0 auto;padding:32px 24px}
.intro{text-align:center;max-width:640px;margin:0 auto 40px}
.intro h2{font-size:36px;font-weight:600;margin:0 0 12px}
.intro p{color:#71717a;font-size:17px}
.card{background:#fff;border:1px solid #e4e4e7;border-radius:8px}
.search{max-width:560px;margin:0 auto 40px;padding:20px}
form{display:flex;gap:12px}
input{flex:1;padding:9px 12px;border:1px solid #e4e4e7;border-radius:6px;background:#fafafa;text-transform:uppercase;font-size:14px}
button{padding:9px 18px;border:0;border-radius:6px;background:#18181b;color:#fff;font-size:14px;cursor:pointer}
button:disabled,input:disabled{opacity:.5;cursor:not-allowed}
.error{margin-top:16px;padding:12px;background:#fef2f2;color:#dc2626;border-radius:6px;font-size:14px}
.results{display:grid;grid-template-columns:2fr 1fr;gap:32px}
@media (max-width:900px){.results{grid-template-columns:1fr}}
.card-head{padding:16px 24px;border-bottom:1px solid #f4f4f5}
.card-head h3{margin:0;font-size:18px}
.muted{color:#71717a;font-size:13px;margin-top:4px}
.summary{padding:24px;font-size:14px;line-height:1.6}
.pending{text-align:center;color:#71717a;padding:48px 0}
.filings{max-height:600px;overflow-y:auto}
.filing{display:block;padding:14px 24px;border-top:1px solid #f4f4f5;color:inherit;text-decoration:none}
.filing:hover{background:#fafafa}
.badge{display:inline-block;padding:2px 8px;border-radius:4px;background:#f4f4f5;font-size:12px;font-weight:500;margin-bottom:6px}
[hidden]{display:none!important}
</style>
</head>
<body>
<header><h1>FinSight AI</h1></header>
<main>
  <div class="intro">
    <h2>Company Financial Insights</h2>
    <p>Enter a US stock ticker to fetch recent SEC filings and generate an AI-powered summary
    of the company's financial performance and announcements over the past year.</p>
  </div>
  <div class="card search">
    <form id="search-form">
      <input id="ticker" type="text" autocomplete="off"
             placeholder="Enter ticker symbol (e.g., AAPL, MSFT, TSLA)">
      <button id="submit" type="submit" disabled>Analyze</button>
    </form>
    <div id="error" class="error" hidden></div>
  </div>
  <div id="results" class="results" hidden>
    <div class="card">
      <div class="card-head">
        <h3 id="company-name"></h3>
        <div id="company-meta" class="muted"></div>
      </div>
      <div class="summary">
        <strong>AI Financial Summary (Past 12 Months)</strong>
        <div id="summary-pending" class="pending" hidden>
          <p>Analyzing financial reports and news...</p>
          <p class="muted">This may take a few moments.</p>
        </div>
        <div id="summary"></div>
      </div>
    </div>
    <div class="card">
      <div class="card-head">
        <h3>Recent SEC Filings</h3>
        <div class="muted">Past 12 months (10-K, 10-Q, 8-K)</div>
      </div>
      <div id="filings" class="filings"></div>
    </div>
  </div>
</main>
<script>
const $ = (id) => document.getElementById(id);
let state = "idle";

function setState(next) {
  state = next;
  const busy = state === "searching" || state === "summary_pending";
  $("ticker").disabled = busy;
  $("submit").disabled = busy || !$("ticker").value.trim();
  $("submit").textContent = state === "searching" ? "Loading..." : "Analyze";
  $("summary-pending").hidden = state !== "summary_pending";
}

function renderFilings(data) {
  $("company-name").textContent = data.companyName;
  $("company-meta").textContent = `Ticker: ${data.ticker} \\u2022 CIK: ${data.cik}`;
  const list = $("filings");
  list.replaceChildren();
  if (data.filings.length === 0) {
    const empty = document.createElement("div");
    empty.className = "pending";
    empty.textContent = "No recent filings found.";
    list.append(empty);
  }
  for (const f of data.filings) {
    const a = document.createElement("a");
    a.className = "filing";
    a.href = f.url;
    a.target = "_blank";
    a.rel = "noopener noreferrer";
    const badge = document.createElement("span");
    badge.className = "badge";
    badge.textContent = f.form;
    const desc = document.createElement("div");
    desc.textContent = f.description;
    const filed = document.createElement("div");
    filed.className = "muted";
    filed.textContent = `Filed: ${f.filingDate}`;
    a.append(badge, desc, filed);
    list.append(a);
  }
  $("results").hidden = false;
}

async function loadSummary(data) {
  setState("summary_pending");
  let text;
  try {
    const params = new URLSearchParams({company_name: data.companyName});
    const r = await fetch(`/api/summary/${encodeURIComponent(data.ticker)}?${params}`);
    if (!r.ok) throw new Error(`HTTP ${r.status}`);
    text = (await r.json()).narrativeText;
  } catch (err) {
    text = `Failed to generate summary: ${err.message}`;
  }
  // Model output is built from web content; strip scripts and handlers
  $("summary").innerHTML = DOMPurify.sanitize(marked.parse(text));
  setState("summary_loaded");
}

$("ticker").addEventListener("input", (e) => {
  e.target.value = e.target.value.toUpperCase();
  setState(state);
});

$("search-form").addEventListener("submit", async (e) => {
  e.preventDefault();
  const ticker = $("ticker").value.trim();
  if (!ticker || state === "searching" || state === "summary_pending") return;

  $("error").hidden = true;
  $("results").hidden = true;
  $("summary").replaceChildren();
  setState("searching");

  let data;
  try {
    const r = await fetch(`/api/sec/filings/${encodeURIComponent(ticker)}`);
    if (!r.ok) throw new Error("Failed to fetch company data. Please check the ticker symbol.");
    data = await r.json();
  } catch (err) {
    $("error").textContent = err.message || "An error occurred while fetching data.";
    $("error").hidden = false;
    setState("idle");
    return;
  }

  renderFilings(data);
  await loadSummary(data);
});
</script>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index() -> HTMLResponse:
    """Serve the analysis page."""
    return HTMLResponse(HTML)
