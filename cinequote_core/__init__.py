"""Quiz logic, runtime loop and render hosts for cinequote."""
