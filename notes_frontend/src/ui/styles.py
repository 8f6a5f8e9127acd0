# notes_frontend/src/ui/styles.py
from __future__ import annotations

CSS_BLOCK = r"""
:root {
  --color-primary: #1976D2;
  --color-secondary: #424242;
  --color-accent: #FFC107;
  --color-bg: #f7f8fa;
  --color-surface: #ffffff;
  --color-border: #e3e6ea;
  --color-text: #1f2328;
  --color-text-muted: #6b7280;
  --radius: 10px;
  --shadow: 0 1px 3px rgba(0, 0, 0, .08), 0 4px 12px rgba(0, 0, 0, .04);
}
* { box-sizing: border-box; }
body {
  margin: 0;
  background: var(--color-bg);
  color: var(--color-text);
  font-family: system-ui, -apple-system, "Segoe UI", Roboto, sans-serif;
}
form { margin: 0; display: inline; }
.container { min-height: 100vh; display: flex; flex-direction: column; }

.app-header {
  background: var(--color-surface);
  border-bottom: 1px solid var(--color-border);
  position: sticky; top: 0; z-index: 10;
}
.app-header .inner { display: flex; align-items: center; gap: 12px; padding: 12px 20px; }
.brand-logo {
  width: 32px; height: 32px; border-radius: 8px;
  display: grid; place-items: center;
  background: var(--color-primary); color: #fff; font-weight: 700;
}
.brand-title { font-weight: 600; font-size: 1.1rem; }
.header-actions { margin-left: auto; display: flex; gap: 8px; }

.btn {
  border: 1px solid transparent; border-radius: 8px;
  padding: 8px 14px; font: inherit; cursor: pointer;
}
.btn-primary { background: var(--color-primary); color: #fff; }
.btn-secondary { background: var(--color-surface); color: var(--color-secondary); border-color: var(--color-border); }
.btn-accent { background: var(--color-accent); color: #1f2328; }
.icon-btn {
  background: none; border: none; padding: 4px 6px;
  color: var(--color-primary); cursor: pointer; font: inherit; font-size: .85rem;
}

.app-main { display: flex; flex: 1; }
.sidebar {
  width: 240px; padding: 16px;
  background: var(--color-surface); border-right: 1px solid var(--color-border);
}
.nav-group-title {
  font-size: .75rem; text-transform: uppercase; letter-spacing: .05em;
  color: var(--color-text-muted); margin-bottom: 8px;
}
.nav-list { list-style: none; margin: 0; padding: 0; }
.nav-item { display: block; padding: 6px 8px; border-radius: 6px; color: inherit; text-decoration: none; }
.nav-item.active { background: rgba(25, 118, 210, .1); color: var(--color-primary); }
.search-input, .input, .textarea {
  width: 100%; padding: 8px 10px; font: inherit;
  border: 1px solid var(--color-border); border-radius: 8px; background: #fff;
}
.textarea { min-height: 160px; resize: vertical; }

.content { flex: 1; padding: 20px; }
.toolbar { display: none; gap: 8px; margin-bottom: 16px; }
.empty { color: var(--color-text-muted); padding: 40px; text-align: center; }
.card-grid { display: grid; gap: 16px; grid-template-columns: repeat(auto-fill, minmax(240px, 1fr)); }
.note-card {
  background: var(--color-surface); border: 1px solid var(--color-border);
  border-radius: var(--radius); box-shadow: var(--shadow);
  padding: 14px; display: flex; flex-direction: column; gap: 8px;
}
.note-title { margin: 0; font-size: 1rem; }
.note-content { white-space: pre-wrap; color: var(--color-secondary); font-size: .9rem; flex: 1; }
.note-meta {
  display: flex; align-items: center; justify-content: space-between;
  font-size: .75rem; color: var(--color-text-muted);
}
.card-actions { display: flex; gap: 4px; }

.dialog-backdrop {
  position: fixed; inset: 0; background: rgba(0, 0, 0, .35);
  display: grid; place-items: center; z-index: 20;
}
.dialog {
  width: min(560px, 92vw); background: var(--color-surface);
  border-radius: var(--radius); box-shadow: var(--shadow);
}
.dialog-header {
  display: flex; align-items: center; justify-content: space-between;
  padding: 14px 16px; border-bottom: 1px solid var(--color-border);
}
.dialog-title { margin: 0; }
.dialog-body { padding: 16px; display: flex; flex-direction: column; gap: 12px; }
.dialog-body label { display: block; font-size: .85rem; color: var(--color-text-muted); margin-bottom: 6px; }
.dialog-actions { display: flex; justify-content: flex-end; gap: 8px; padding: 12px 16px; }

@media (max-width: 720px) {
  .sidebar { display: none; }
  .toolbar { display: flex; flex-wrap: wrap; }
  .header-actions { display: none; }
}
"""
