# SPDX-License-Identifier: MIT

import uuid

TASK_ID = uuid.UUID("6f1b8c3e-2d4a-4e5b-9c7d-0a1b2c3d4e5f")
PARENT_ID = uuid.UUID("0d9e8f7a-6b5c-4d3e-8f1a-2b3c4d5e6f70")
