import json

_INDEX_TEMPLATE = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>Short-flix</title>
  <style>
    :root {
      --bg: #0b1020;
      --card: rgba(255,255,255,0.06);
      --border: rgba(255,255,255,0.14);
      --muted: #9ca3af;
      --text: #f9fafb;
      --accent: linear-gradient(90deg, #a855f7, #ec4899, #fb923c);
      --pink: #db2777;
      --danger: #f87171;
      --radius: 14px;
      --shadow: 0 12px 32px rgba(0,0,0,0.35);
    }
    * { box-sizing: border-box; }
    body { margin: 0; color: var(--text); background: var(--bg);
      font-family: Inter, -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Arial, sans-serif; }
    .container { max-width: 1152px; margin: 0 auto; padding: 24px 16px 60px; display: flex; flex-direction: column; gap: 24px; }
    header { display: flex; flex-wrap: wrap; justify-content: space-between; align-items: center; gap: 16px;
      border-bottom: 1px solid var(--border); padding-bottom: 16px; }
    .pill { display: inline-flex; align-items: center; gap: 8px; border-radius: 999px; padding: 4px 12px;
      font-size: 12px; font-weight: 600; background: var(--accent); }
    h1 { font-size: 28px; margin: 8px 0 4px; }
    .muted { color: var(--muted); font-size: 13px; }
    .stats { text-align: right; font-size: 12px; color: var(--muted); }
    .stats b { color: var(--text); }

    .toolbar { display: flex; flex-wrap: wrap; justify-content: space-between; align-items: center; gap: 12px;
      padding: 16px; border: 1px solid var(--border); border-radius: var(--radius); background: var(--card); }
    form { display: flex; gap: 8px; flex: 1; max-width: 440px; }
    .search-wrap { position: relative; flex: 1; }
    input[type=text] { width: 100%; padding: 10px 32px 10px 12px; border-radius: 10px; border: 1px solid var(--border);
      background: rgba(17,24,39,0.7); color: var(--text); outline: none; }
    input[type=text]:focus { box-shadow: 0 0 0 3px rgba(168,85,247,0.35); }
    .clear { position: absolute; right: 8px; top: 50%; transform: translateY(-50%); border: none; background: none;
      color: var(--muted); cursor: pointer; font-size: 16px; }
    .btn { border: none; border-radius: 10px; padding: 10px 16px; font-weight: 700; cursor: pointer; background: var(--accent); color: #fff; }
    .seg { display: inline-flex; gap: 4px; padding: 4px; border-radius: 999px; background: rgba(255,255,255,0.08); }
    .seg button { border: none; border-radius: 999px; padding: 6px 12px; font-size: 12px; cursor: pointer; background: transparent; color: var(--text); }
    .seg button.on { background: rgba(255,255,255,0.18); }
    .seg button:disabled { opacity: 0.4; cursor: not-allowed; }
    .count { margin-left: 4px; padding: 0 6px; border-radius: 999px; background: rgba(0,0,0,0.35); font-size: 10px; }

    .error { border: 1px solid rgba(248,113,113,0.4); background: rgba(248,113,113,0.1); color: var(--danger);
      border-radius: 8px; padding: 8px 12px; font-size: 14px; }
    .empty { border: 1px dashed var(--border); border-radius: var(--radius); padding: 40px 24px; text-align: center; }
    .grid { display: grid; gap: 16px; grid-template-columns: repeat(auto-fill, minmax(200px, 1fr)); }
    .card { border: 1px solid var(--border); border-radius: var(--radius); overflow: hidden; background: var(--card);
      box-shadow: var(--shadow); display: flex; flex-direction: column; }
    .thumb { position: relative; aspect-ratio: 16 / 9; background: #111827; cursor: pointer; overflow: hidden; }
    .thumb video { position: absolute; inset: 0; width: 100%; height: 100%; object-fit: cover; transition: transform .3s; }
    .card:hover .thumb video { transform: scale(1.05); }
    .thumb .shade { position: absolute; inset: 0; pointer-events: none; background: linear-gradient(to top, rgba(0,0,0,0.7), transparent); }
    .thumb .caption { position: absolute; left: 8px; right: 8px; bottom: 8px; font-size: 14px; font-weight: 600;
      white-space: nowrap; overflow: hidden; text-overflow: ellipsis; pointer-events: none; }
    .body { padding: 12px; display: flex; justify-content: space-between; gap: 8px; align-items: flex-start; }
    .title { font-size: 14px; font-weight: 700; margin: 0 0 6px; }
    .chips { display: flex; flex-wrap: wrap; gap: 4px; }
    .chip { font-size: 10px; text-transform: uppercase; letter-spacing: 0.5px; border: 1px solid var(--border);
      border-radius: 999px; padding: 2px 6px; }
    .heart { width: 32px; height: 32px; border-radius: 999px; border: 1px solid var(--border); background: transparent;
      color: var(--text); cursor: pointer; flex-shrink: 0; }
    .heart.on { background: var(--pink); border-color: var(--pink); }
    .skeleton { background: linear-gradient(90deg, rgba(255,255,255,0.05), rgba(255,255,255,0.12), rgba(255,255,255,0.05));
      background-size: 200% 100%; animation: shimmer 1.2s infinite; border-radius: 6px; }
    @keyframes shimmer { to { background-position: -200% 0; } }

    .overlay { position: fixed; inset: 0; background: rgba(0,0,0,0.75); display: grid; place-items: center; z-index: 50; }
    .dialog { width: min(768px, 94vw); background: rgba(15,23,42,0.97); border: 1px solid var(--border);
      border-radius: var(--radius); padding: 20px; position: relative; }
    .dialog h2 { margin: 8px 0; font-size: 18px; display: flex; flex-wrap: wrap; justify-content: space-between; gap: 8px; }
    .dialog video { width: 100%; aspect-ratio: 16 / 9; background: #000; border-radius: 8px; margin-top: 8px; }
    .close { position: absolute; top: 8px; right: 12px; border: none; background: none; color: var(--muted); font-size: 20px; cursor: pointer; }
    .hidden { display: none; }
  </style>
</head>
<body>
  <div class="container">
    <header>
      <div>
        <span class="pill">&#9679; Short-flix &middot; Mini Shorts Platform</span>
        <h1>Watch shorts instantly</h1>
        <div class="muted">Scroll through bite-sized videos in a clean grid. Search by vibe, filter favorites, and enjoy short-form content in seconds.</div>
      </div>
      <div class="stats">
        <div>Shorts: <b id="totalShorts">0</b></div>
        <div>Favorites: <b id="totalFavorites">0</b></div>
      </div>
    </header>

    <section class="toolbar">
      <form id="searchForm">
        <div class="search-wrap">
          <input type="text" id="search" placeholder="Search by title or tag..." autocomplete="off" />
          <button type="button" class="clear hidden" id="clearBtn" aria-label="Clear search">&times;</button>
        </div>
        <button type="submit" class="btn">Search</button>
      </form>
      <div>
        <span class="muted">Filter:</span>
        <div class="seg">
          <button type="button" id="allBtn" class="on">All</button>
          <button type="button" id="favBtn" disabled>Favorites<span class="count hidden" id="favCount"></span></button>
        </div>
      </div>
    </section>

    <section>
      <div class="error hidden" id="error"></div>
      <div id="content" style="margin-top:16px"></div>
    </section>
  </div>

  <div class="overlay hidden" id="overlay">
    <div class="dialog" role="dialog" aria-modal="true">
      <button class="close" id="closeBtn" aria-label="Close">&times;</button>
      <div id="dialogBody"></div>
    </div>
  </div>

  <script>
    const base = __API_PREFIX__;
    const FAVORITES_KEY = __FAVORITES_KEY__;
    const SKELETON_TILES = 8;

    const state = {
      shorts: [],
      loading: true,
      error: null,
      search: '',
      favorites: new Set(),
      showFavoritesOnly: false,
      activeShort: null,
    };

    function loadFavorites() {
      const stored = localStorage.getItem(FAVORITES_KEY);
      if (!stored) return new Set();
      try {
        return new Set(JSON.parse(stored));
      } catch (err) {
        console.error('Failed to parse favorites from localStorage:', err);
        return new Set();
      }
    }

    function saveFavorites() {
      localStorage.setItem(FAVORITES_KEY, JSON.stringify(Array.from(state.favorites)));
    }

    async function fetchShorts(query) {
      state.loading = true; state.error = null; render();
      try {
        const params = new URLSearchParams();
        if (query && query.trim().length > 0) params.set('q', query.trim());
        const qs = params.toString();
        const r = await fetch(base + '/shorts' + (qs ? '?' + qs : ''), { headers: { 'Content-Type': 'application/json' } });
        if (!r.ok) throw new Error('HTTP ' + r.status);
        state.shorts = await r.json();
      } catch (err) {
        console.error(err);
        state.error = 'Failed to load shorts. Please try again.';
      } finally {
        state.loading = false;
        render();
      }
    }

    function toggleFavorite(id) {
      if (state.favorites.has(id)) state.favorites.delete(id); else state.favorites.add(id);
      saveFavorites();
      render();
    }

    function visibleShorts() {
      let list = state.shorts;
      if (state.showFavoritesOnly) list = list.filter(s => state.favorites.has(s.id));
      if (!state.search.trim()) return list;
      const q = state.search.toLowerCase();
      return list.filter(s => s.title.toLowerCase().includes(q) || s.tags.some(t => t.toLowerCase().includes(q)));
    }

    function esc(text) {
      const d = document.createElement('div');
      d.textContent = String(text);
      return d.innerHTML;
    }

    function chips(tags) { return tags.map(t => `<span class="chip">${esc(t)}</span>`).join(''); }

    function skeletonTile() {
      return `<div class="card"><div class="thumb skeleton"></div><div class="body" style="flex-direction:column">
        <div class="skeleton" style="height:14px;width:75%"></div>
        <div style="display:flex;gap:4px"><div class="skeleton" style="height:14px;width:48px"></div><div class="skeleton" style="height:14px;width:64px"></div></div>
      </div></div>`;
    }

    function shortCard(s) {
      const fav = state.favorites.has(s.id);
      return `<div class="card" data-id="${s.id}">
        <div class="thumb" data-open="${s.id}">
          <video src="${esc(s.videoUrl)}" muted preload="metadata"></video>
          <div class="shade"></div>
          <div class="caption">${esc(s.title)}</div>
        </div>
        <div class="body">
          <div><p class="title">${esc(s.title)}</p><div class="chips">${chips(s.tags)}</div></div>
          <button type="button" class="heart ${fav ? 'on' : ''}" data-fav="${s.id}"
            aria-label="${fav ? 'Remove from favorites' : 'Add to favorites'}">${fav ? '&#9829;' : '&#9825;'}</button>
        </div>
      </div>`;
    }

    function renderDialog() {
      const overlay = document.getElementById('overlay');
      const s = state.activeShort;
      if (!s) {
        overlay.classList.add('hidden');
        document.getElementById('dialogBody').innerHTML = '';
        return;
      }
      document.getElementById('dialogBody').innerHTML = `
        <h2><span>${esc(s.title)}</span><span class="chips">${chips(s.tags)}</span></h2>
        <div class="muted">Playing from your Short-flix collection.</div>
        <video src="${esc(s.videoUrl)}" controls autoplay></video>`;
      overlay.classList.remove('hidden');
    }

    function render() {
      document.getElementById('totalShorts').textContent = state.shorts.length;
      document.getElementById('totalFavorites').textContent = state.favorites.size;

      const favBtn = document.getElementById('favBtn');
      const favCount = document.getElementById('favCount');
      favBtn.disabled = state.favorites.size === 0;
      favBtn.classList.toggle('on', state.showFavoritesOnly);
      document.getElementById('allBtn').classList.toggle('on', !state.showFavoritesOnly);
      favCount.textContent = state.favorites.size;
      favCount.classList.toggle('hidden', state.favorites.size === 0);
      document.getElementById('clearBtn').classList.toggle('hidden', !state.search);

      const errorEl = document.getElementById('error');
      errorEl.textContent = state.error || '';
      errorEl.classList.toggle('hidden', !state.error);

      const content = document.getElementById('content');
      if (state.loading) {
        content.innerHTML = `<div class="grid">${Array.from({ length: SKELETON_TILES }).map(skeletonTile).join('')}</div>`;
      } else {
        const items = visibleShorts();
        if (!items.length) {
          content.innerHTML = `<div class="empty"><p class="muted">No shorts found. Try another search term${state.showFavoritesOnly ? ' or show all instead.' : '.'}</p></div>`;
        } else {
          content.innerHTML = `<div class="grid">${items.map(shortCard).join('')}</div>`;
        }
      }
      renderDialog();
    }

    function openShort(id) {
      state.activeShort = state.shorts.find(s => s.id === id) || null;
      renderDialog();
    }

    function closeDialog() {
      state.activeShort = null;
      renderDialog();
    }

    document.getElementById('searchForm').addEventListener('submit', (e) => {
      e.preventDefault();
      fetchShorts(state.search);
    });
    document.getElementById('search').addEventListener('input', (e) => {
      state.search = e.target.value;
      render();
    });
    document.getElementById('clearBtn').addEventListener('click', () => {
      state.search = '';
      document.getElementById('search').value = '';
      fetchShorts();
    });
    document.getElementById('allBtn').addEventListener('click', () => { state.showFavoritesOnly = false; render(); });
    document.getElementById('favBtn').addEventListener('click', () => { state.showFavoritesOnly = true; render(); });
    document.getElementById('content').addEventListener('click', (e) => {
      const fav = e.target.closest('[data-fav]');
      if (fav) { e.stopPropagation(); toggleFavorite(Number(fav.dataset.fav)); return; }
      const open = e.target.closest('[data-open]');
      if (open) openShort(Number(open.dataset.open));
    });
    document.getElementById('closeBtn').addEventListener('click', closeDialog);
    document.getElementById('overlay').addEventListener('click', (e) => { if (e.target.id === 'overlay') closeDialog(); });
    document.addEventListener('keydown', (e) => { if (e.key === 'Escape' && state.activeShort) closeDialog(); });

    state.favorites = loadFavorites();
    fetchShorts();
  </script>
</body>
</html>
"""


def render_index(api_prefix: str, favorites_key: str) -> str:
    return (
        _INDEX_TEMPLATE
        .replace("__API_PREFIX__", json.dumps(api_prefix))
        .replace("__FAVORITES_KEY__", json.dumps(favorites_key))
    )
