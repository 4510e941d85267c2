#!/usr/bin/env python3
"""
EIRSCOPE - Bluetooth inquiry / advertising report service

Keeps one field-presence tracked report per discovered device snapshot:
- Classic Extended Inquiry Response (EIR) data
- LE advertising and scan response data
- Merge with change masks for update notifications
"""

from app import main

if __name__ == '__main__':
    main()
