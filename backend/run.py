from quickword import create_app

# Entry point for the flask CLI: `flask --app run round-word 0 --interval 30`
app = create_app()
