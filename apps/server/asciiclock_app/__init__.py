"""HTTP server and command line front end for the ASCII clock."""
