from hireboard import create_app

app = create_app()
