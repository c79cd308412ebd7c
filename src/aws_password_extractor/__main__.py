from aws_password_extractor.cli import main

main()
