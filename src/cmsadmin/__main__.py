from cmsadmin.cli import app

app(prog_name="cms-admin")
