from typing import Any

import pytest


@pytest.fixture
def stats() -> dict[str, Any]:
    """A small stats document covering every module shape."""
    return {
        "assets": [
            {"name": "main.js", "chunks": [0], "size": 1200},
            {"name": "vendor.mjs", "chunks": ["1", 2], "size": 900},
            {"name": "main.css", "chunks": [0], "size": 300},
            {"name": "main.js.map", "chunks": [0], "size": 4000},
        ],
        "modules": [
            {
                "identifier": "/root/src/index.js",
                "name": "./src/index.js",
                "size": 100,
                "source": "import 'lodash';",
                "chunks": [0],
            },
            {
                "chunks": [1],
                "modules": [
                    {
                        "identifier": "/root/node_modules/lodash/index.js",
                        "name": "./node_modules/lodash/index.js",
                        "size": 500,
                        "source": "module.exports = {};",
                        "chunks": [],
                    },
                    {
                        "identifier": "/root/node_modules/moment/locale sync /es/",
                        "name": "./node_modules/moment/locale sync /es/",
                        "size": 160,
                        "chunks": [2],
                    },
                ],
            },
        ],
    }
