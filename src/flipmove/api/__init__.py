# Plain text response when the player to move has no valid moves.
PASS_RESPONSE = "PASS"

FORM_HTML = """
<body><form method=get>
Paste JSON here:<p/><textarea name=json cols=80 rows=24></textarea>
<p/><input type=submit>
</form>
</body>"""
