"""
Outer surfaces — console CLI (cli.py) and Streamlit dashboard (streamlit_app.py).
"""
