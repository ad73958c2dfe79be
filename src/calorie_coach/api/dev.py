"""Developer-only storyboard endpoints, mounted when enabled in settings."""

from dataclasses import asdict

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from calorie_coach.domain.catalog import RECOMMENDATIONS, SAMPLE_FOODS
from calorie_coach.domain.routing import STORYBOARD_PREFIX, SessionState, View
from calorie_coach.services.dashboard import SAMPLE_TODAY, SAMPLE_WEEK

router = APIRouter(prefix="/dev", tags=["dev"])


@router.get("/storyboards")
async def storyboards() -> dict[str, object]:
    """Return the views and sample fixtures used to preview widgets."""
    return {
        "prefix": STORYBOARD_PREFIX,
        "states": [state.value for state in SessionState],
        "views": [view.value for view in View],
        "fixtures": {
            "foods": [asdict(food) for food in SAMPLE_FOODS],
            "recommendations": {
                tab: [asdict(food) for food in foods]
                for tab, foods in RECOMMENDATIONS.items()
            },
            "today": asdict(SAMPLE_TODAY),
            "week": [asdict(day) for day in SAMPLE_WEEK],
        },
    }


@router.get("/ui", response_class=HTMLResponse)
async def storyboard_ui() -> HTMLResponse:
    """Minimal page that renders the storyboard fixtures."""
    return HTMLResponse(_STORYBOARD_HTML)


_STORYBOARD_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Calorie Coach Storyboards</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      pre { background: #f6f6f6; padding: 1rem; overflow: auto; }
    </style>
  </head>
  <body>
    <h1>Calorie Coach Storyboards</h1>
    <button onclick="load()">Load fixtures</button>
    <pre id="output">Ready.</pre>
    <script>
      async function load() {
        const output = document.getElementById('output');
        const res = await fetch('/dev/storyboards');
        if (!res.ok) {
          output.textContent = 'Error: ' + res.status;
          return;
        }
        output.textContent = JSON.stringify(await res.json(), null, 2);
      }
    </script>
  </body>
</html>
"""
