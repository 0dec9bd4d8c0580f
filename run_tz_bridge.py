#!/usr/bin/env python3
"""
TZ Bridge - Web Service Entry Point

Run this script to start the timezone service:
    python3 run_tz_bridge.py

Then query: http://127.0.0.1:8490/timezone
"""

from flask_app import create_app
import os

app = create_app(os.getenv('FLASK_CONFIG', 'development'))

if __name__ == '__main__':
    settings = app.config['BRIDGE_SETTINGS']
    # PORT wins over the configured port
    port = int(os.getenv('PORT', settings.port))

    print("\n" + "="*60)
    print("🕒 TZ Bridge Service")
    print("="*60)
    print(f"\n📡 Channel: {settings.channel_name}")
    print(f"🔎 Strategies: {', '.join(settings.strategies)}")
    print(f"🌐 Query: http://127.0.0.1:{port}/timezone")
    print("\n💡 Press CTRL+C to stop the server\n")

    app.run(debug=app.config.get('DEBUG', False), host=settings.host, port=port)
