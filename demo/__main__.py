#!/usr/bin/env python3
"""Demo for package-level main.

Ex.

```bash
python3 -m demo
```

"""

import logging

from . import text

logging.basicConfig(level=logging.DEBUG, format='%(levelname)s: %(message)s')

text.main()
